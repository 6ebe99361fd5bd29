# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---
#
import gzip
import json
import logging
import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict, Iterable, Optional

from dsfilters._constants import (
    COMPONENT_FILTER_TITLE,
    FULL_FILTER_TITLE,
    GZIP_SUFFIX,
    JSON_FILTER_KEY,
    JSON_SEARCH_OPERATION,
    LINE_FILTER_PATTERN,
    PROGRESS_LINE_COUNT,
)
from dsfilters.exceptions import FileAccessError, PatternError
from dsfilters.frequency import FrequencyTable
from dsfilters.normalize import NormalizedFilter, compile_component_pattern


@dataclass
class AnalyserStats:
    counters: DefaultDict[str, int] = field(default_factory=lambda: defaultdict(
        int,
        {
            'files': 0,
            'lines_read': 0,
            'filters': 0,
            'undecodable': 0,
            'malformed_json': 0
        }
    ))


class FilterAnalyser:
    """
    Collects search filter shapes from access logs.

    Attributes:
        logger (logging.Logger): Logger used for diagnostics.
        full_filters (FrequencyTable): Occurrences of each normalised full filter.
        components (FrequencyTable): Occurrences of each normalised (attribute=value) component.
        stats (AnalyserStats): Run counters, only used for logging.
    """
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.full_filters = FrequencyTable(title=FULL_FILTER_TITLE)
        self.components = FrequencyTable(title=COMPONENT_FILTER_TITLE)
        self.stats = AnalyserStats()
        (self.line_regex, self.component_regex) = self._setup_regexes()

    def _setup_regexes(self):
        """
        Compile the line and component patterns.

        Returns:
            tuple: (filter="..." line regex, (attribute=value) component regex)

        Raises:
            PatternError: If a built-in pattern does not compile.
        """
        try:
            line_regex = re.compile(LINE_FILTER_PATTERN)
        except re.error as e:
            raise PatternError(f"Failed to compile line pattern - {e}")

        return line_regex, compile_component_pattern()

    def extract_filter(self, line: str) -> Optional[str]:
        """
        Return the raw search filter logged on a line.

        Args:
            line (str): Single log line, legacy or JSON format.

        Returns:
            str | None: The filter without its quotes, None if the line has none.
        """
        if line.lstrip().startswith('{'):
            try:
                log_entry = json.loads(line)
            except json.JSONDecodeError:
                self.logger.error(f"Malformed JSON line: {line}")
                self.stats.counters['malformed_json'] += 1
                return None

            if not isinstance(log_entry, dict) or log_entry.get("operation") != JSON_SEARCH_OPERATION:
                return None
            search_filter = log_entry.get(JSON_FILTER_KEY)
            if search_filter and isinstance(search_filter, str):
                return search_filter
            return None

        match = self.line_regex.search(line)
        if match is None:
            return None
        return match.group('search_filter')

    def process_filter(self, raw_filter: str) -> NormalizedFilter:
        """
        Count the components and the full shape of one raw filter.

        Args:
            raw_filter (str): Filter as logged.

        Returns:
            NormalizedFilter: The normalised filter.
        """
        nfilter = NormalizedFilter.from_raw(raw_filter, self.component_regex)
        for component in nfilter.normalized_components:
            self.components.insert(component)
        self.full_filters.insert(nfilter.full_filter)
        self.stats.counters['filters'] += 1
        self.logger.debug(f"{raw_filter} -> {nfilter.full_filter}")
        return nfilter

    def process_line(self, line: str) -> bool:
        """
        Process a single access log line.

        Returns:
            bool: True if a filter was found and counted, False otherwise.
        """
        line = line.rstrip('\r\n')
        raw_filter = self.extract_filter(line)
        if raw_filter is None:
            return False
        self.process_filter(raw_filter)
        return True

    def _open(self, filepath: str):
        if filepath.endswith(GZIP_SUFFIX):
            self.logger.debug(f"File is compressed: {filepath}")
            return gzip.open(filepath, 'rb')
        return open(filepath, 'rb')

    def process_file(self, filepath: str):
        """
        Process a file line by line, plain or gzip compressed.

        Args:
            filepath (str): Path to the file.

        Raises:
            FileAccessError: If the file can not be opened or read.
        """
        line_number = 0
        line_count = 0

        self.logger.debug(f"Processing file: {filepath}")

        try:
            with self._open(filepath) as filehandle:
                for line in filehandle:
                    line_number += 1
                    line_count += 1
                    self.stats.counters['lines_read'] += 1
                    try:
                        line_content = line.decode('utf-8')
                    except UnicodeDecodeError as de:
                        self.logger.warning(f"non-decodable line {filepath}:{line_number} - {de}")
                        self.stats.counters['undecodable'] += 1
                        line_content = line.decode('utf-8', errors='replace')

                    if not self.process_line(line_content):
                        self.logger.debug(f"Skipping line: {filepath}:{line_number}.")

                    if line_count >= PROGRESS_LINE_COUNT:
                        self.logger.info(f"{line_number:10d} Lines Processed in {filepath}")
                        line_count = 0
        except (OSError, EOFError) as e:
            raise FileAccessError(filepath, e)

        self.stats.counters['files'] += 1
        self.logger.debug(f"{filepath}: {line_number} lines read")

    def process_files(self, filepaths: Iterable[str]):
        """Process files strictly in the given order, the first failure aborts."""
        for filepath in filepaths:
            self.process_file(filepath)

        counters = self.stats.counters
        self.logger.info(f"{counters['files']} file(s), {counters['lines_read']} lines, "
                         f"{counters['filters']} filters, {len(self.full_filters)} distinct filters, "
                         f"{len(self.components)} distinct components")

    def report(self, size_limit: Optional[int] = None) -> str:
        """
        Sort both tables and render them, full filters first.

        Args:
            size_limit (int | None): Maximum number of rows per table.

        Returns:
            str: The report text.
        """
        self.full_filters.sort()
        self.components.sort()
        return "\n\n".join([
            self.full_filters.render(size_limit=size_limit),
            self.components.render(size_limit=size_limit),
        ])
