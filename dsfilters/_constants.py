# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

filterAnalyzerVersion = "1.0"

# Value normalisation
VALUE_PLACEHOLDER = '<value>'
VALUE_WILDCARD = '*'

# filter="string" as logged on a SRCH line
LINE_FILTER_PATTERN = r'filter="(?P<search_filter>[^"]+)"'

# (attribute=value), one level only
COMPONENT_PATTERN = r'''
    \(
        (?P<attribute>[^=\(]+)      # attribute, anything but = and (
        =
        (?P<value>[^\)]+)           # value, up to the next )
    \)
'''

# JSON access log format
JSON_SEARCH_OPERATION = 'SEARCH'
JSON_FILTER_KEY = 'filter'

# Report layout
COUNT_COLUMN_WIDTH = 12
FILTER_COLUMN_WIDTH = 62
COUNT_COLUMN_TITLE = 'Occurrences'
FULL_FILTER_TITLE = 'Full filters'
COMPONENT_FILTER_TITLE = 'Filter components'

# Emit a progress message every N lines
PROGRESS_LINE_COUNT = 25000

GZIP_SUFFIX = '.gz'

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
DEFAULT_LOG_LEVEL = 'INFO'
