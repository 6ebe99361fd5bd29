# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Search filter frequency analysis for directory server access logs.
"""

from dsfilters._constants import filterAnalyzerVersion as __version__
from dsfilters.analyser import FilterAnalyser
from dsfilters.frequency import FrequencyEntry, FrequencyTable
from dsfilters.normalize import (
    FilterComponent,
    NormalizedFilter,
    extract_components,
    format_value,
    normalize_filter,
)
