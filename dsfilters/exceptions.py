# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---


class Error(Exception):
    pass


class InvalidArgumentError(Error):
    pass


class FileAccessError(Error):
    """When an input log can not be opened or read."""

    def __init__(self, filepath, reason=None):
        self.filepath = filepath
        self.reason = reason
        msg = "Can not open file: {}".format(filepath)
        if reason is not None:
            msg = "{} - {}".format(msg, reason)
        super(FileAccessError, self).__init__(msg)


class PatternError(Error):
    """A built-in matching pattern failed to compile."""
    pass
