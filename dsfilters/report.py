# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Two column text rendering of a frequency table.

| Occurrences | Full filters                                                   |
+-------------+----------------------------------------------------------------+
|           2 |                                                   (cn=<value>) |

Strings longer than the column are not wrapped, they push the border out.
"""

from dsfilters._constants import (
    COUNT_COLUMN_TITLE,
    COUNT_COLUMN_WIDTH,
    FILTER_COLUMN_WIDTH,
)


def format_header(title):
    return [
        f"| {COUNT_COLUMN_TITLE:<{COUNT_COLUMN_WIDTH - 1}} | {title:<{FILTER_COLUMN_WIDTH}} |",
        f"+{'-' * (COUNT_COLUMN_WIDTH + 1)}+{'-' * (FILTER_COLUMN_WIDTH + 2)}+",
    ]


def format_row(entry):
    return f"|{entry.occurrences:>{COUNT_COLUMN_WIDTH}} | {entry.normalized:>{FILTER_COLUMN_WIDTH}} |"


def render_table(table, title=None, size_limit=None):
    """Render a frequency table in its current order.

    Call sort() on the table first to get the most frequent strings first.

    :param table: FrequencyTable to render
    :param title: column title, defaults to the table title
    :type title: str
    :param size_limit: maximum number of rows, None for all of them
    :type size_limit: int
    :returns: the table as a string, one line per row
    """
    if title is None:
        title = table.title
    lines = format_header(title)
    for num, entry in enumerate(table):
        if size_limit is not None and num >= size_limit:
            break
        lines.append(format_row(entry))
    return "\n".join(lines)
