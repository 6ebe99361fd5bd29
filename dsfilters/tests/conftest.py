# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import gzip
import pytest

from dsfilters.analyser import FilterAnalyser
from dsfilters.cli_base import LogCapture

ACCESS_LOG = [
    '[21/Apr/2025:10:31:20.014629085 +0200] conn=2 fd=64 slot=64 connection from 127.0.0.1 to 127.0.0.1',
    '[21/Apr/2025:10:31:20.015203716 +0200] conn=2 op=0 BIND dn="cn=Directory Manager" method=128 version=3',
    '[21/Apr/2025:10:31:20.016104585 +0200] conn=2 op=1 SRCH base="dc=example,dc=com" scope=2 filter="(uid=jdoe)" attrs=ALL',
    '[21/Apr/2025:10:31:20.016801912 +0200] conn=2 op=1 RESULT err=0 tag=101 nentries=1 wtime=0.000137 optime=0.000689 etime=0.000824',
    '[21/Apr/2025:10:31:21.003130021 +0200] conn=2 op=2 SRCH base="dc=example,dc=com" scope=2 filter="(&(objectClass=person)(cn=John*))" attrs="cn mail"',
    '[21/Apr/2025:10:31:21.101130021 +0200] conn=2 op=3 SRCH base="dc=example,dc=com" scope=2 filter="(uid=asmith)" attrs=ALL',
    '[21/Apr/2025:10:31:21.201130021 +0200] conn=2 op=4 SRCH base="ou=groups,dc=example,dc=com" scope=1 filter="(&(objectClass=groupOfNames)(member=uid=jdoe,ou=people,dc=example,dc=com))" attrs="cn"',
    '[21/Apr/2025:10:31:22.000000001 +0200] conn=2 op=5 UNBIND',
    '[21/Apr/2025:10:31:22.000000002 +0200] conn=2 op=5 fd=64 closed error - U1',
]

OPENLDAP_LOG = [
    'Apr 21 10:31:20 ldap slapd[1234]: conn=1000 fd=12 ACCEPT from IP=127.0.0.1:50000 (IP=0.0.0.0:389)',
    'Apr 21 10:31:20 ldap slapd[1234]: conn=1000 op=1 SRCH base="dc=example,dc=com" scope=2 deref=0 filter="(uid=jdoe)"',
    'Apr 21 10:31:20 ldap slapd[1234]: conn=1000 op=1 SRCH attr=cn mail',
    'Apr 21 10:31:20 ldap slapd[1234]: conn=1000 op=1 SEARCH RESULT tag=101 err=0 nentries=1 text=',
]


def write_log(path, lines, compress=False):
    data = "".join(line + "\n" for line in lines).encode('utf-8')
    if compress:
        with gzip.open(str(path), 'wb') as f:
            f.write(data)
    else:
        with open(str(path), 'wb') as f:
            f.write(data)
    return str(path)


@pytest.fixture
def make_log(tmp_path):
    """Returns a function writing lines to a log file under tmp_path"""
    def _make_log(name, lines, compress=False):
        return write_log(tmp_path / name, lines, compress=compress)
    return _make_log


@pytest.fixture
def access_log(tmp_path):
    return write_log(tmp_path / "access", ACCESS_LOG)


@pytest.fixture
def openldap_log(tmp_path):
    return write_log(tmp_path / "slapd.log", OPENLDAP_LOG)


@pytest.fixture
def logcap():
    cap = LogCapture(name="dsfilters-test")
    yield cap
    cap.log.removeHandler(cap)


@pytest.fixture
def analyser(logcap):
    return FilterAnalyser(logger=logcap.log)
