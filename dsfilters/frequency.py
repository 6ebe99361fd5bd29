# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from dsfilters.report import render_table


@dataclass
class FrequencyEntry:
    """A normalised string and how many times it was seen.

    The string is fixed once the entry exists, only the count moves.
    """
    normalized: str
    occurrences: int = 1


@dataclass
class FrequencyTable:
    """
    Insertion ordered table of normalised strings and their occurrence counts.

    Attributes:
        title (str): Column title used when the table is rendered.
        table (dict): Mapping of normalised string to its FrequencyEntry, in
            insertion order until sort() is called.
    """
    title: str = ''
    table: Dict[str, FrequencyEntry] = field(default_factory=dict)

    def insert(self, normalized: str) -> FrequencyEntry:
        """
        Count one more occurrence of a normalised string.

        Args:
            normalized (str): Already normalised filter or component.

        Returns:
            FrequencyEntry: The new or updated entry.
        """
        entry = self.table.get(normalized)
        if entry is None:
            entry = FrequencyEntry(normalized)
            self.table[normalized] = entry
        else:
            entry.occurrences += 1
        return entry

    def count(self, normalized: str) -> int:
        entry = self.table.get(normalized)
        if entry is None:
            return 0
        return entry.occurrences

    def sorted_entries(self) -> List[FrequencyEntry]:
        # sorted() is stable, ties keep their insertion order
        return sorted(self.table.values(), key=lambda e: e.occurrences, reverse=True)

    def sort(self):
        """Reorder the table by descending occurrences."""
        self.table = {entry.normalized: entry for entry in self.sorted_entries()}

    @property
    def entries(self) -> List[FrequencyEntry]:
        return list(self.table.values())

    def render(self, size_limit: Optional[int] = None) -> str:
        return render_table(self, size_limit=size_limit)

    def __len__(self):
        return len(self.table)

    def __iter__(self) -> Iterator[FrequencyEntry]:
        return iter(self.table.values())

    def __contains__(self, normalized):
        return normalized in self.table
