# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import logging
import sys


def setup_script_logger(name, log_level=logging.INFO):
    """Attach a console logger with cli expected formatting.

    Messages go to STDERR so they never mix with the report on STDOUT.

    :param name: Name of the logger
    :type name: str
    :param log_level: logging level, DEBUG switches to the verbose format
    :type log_level: int
    :return: logging.logger
    """
    log = logging.getLogger(name)
    log_handler = logging.StreamHandler(sys.stderr)

    if log_level <= logging.DEBUG:
        log_format = '%(name)s - %(levelname)s - %(message)s'
    else:
        log_format = '%(message)s'

    log.setLevel(log_level)
    log_handler.setFormatter(logging.Formatter(log_format))
    # Called once per run, but main() may be called repeatedly in-process
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.addHandler(log_handler)
    log.propagate = False

    return log


class LogCapture(logging.Handler):
    """
    This useful class is for intercepting logs, and then making assertions about
    the outputs provided. Used by the unit tests.
    """

    def __init__(self, name="LogCapture", level=logging.DEBUG):
        super(LogCapture, self).__init__()
        self.outputs = []
        self.log = logging.getLogger(name)
        self.log.addHandler(self)
        self.log.setLevel(level)

    def emit(self, record):
        self.outputs.append(record)

    def contains(self, query):
        """
        Assert that the query string listed is in some logged Record.
        """
        for rec in self.outputs:
            if query in rec.getMessage():
                return True
        return False

    def flush(self):
        self.outputs = []
