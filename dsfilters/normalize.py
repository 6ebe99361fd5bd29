# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Helpers to reduce a logged search filter to its shape.

Every literal value in a filter is replaced by a placeholder while the
wildcards are kept, so that "(cn=John)" and "(cn=Jane)" are counted as the
same filter, "(cn=<value>)", but "(cn=Jo*)" is counted as "(cn=<value>*)".
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Tuple

from dsfilters._constants import (
    COMPONENT_PATTERN,
    VALUE_PLACEHOLDER,
    VALUE_WILDCARD,
)
from dsfilters.exceptions import PatternError


def compile_component_pattern():
    """Compile the (attribute=value) matching pattern.

    :raises PatternError: if the built-in pattern is invalid
    :returns: re.Pattern
    """
    try:
        return re.compile(COMPONENT_PATTERN, re.VERBOSE)
    except re.error as e:
        raise PatternError(f"Failed to compile component pattern - {e}")


def format_value(value: str) -> str:
    """Replace every run of non wildcard characters with the placeholder.

    :param value: raw attribute value, e.g. "Jo*n"
    :type value: str
    :returns: normalised value, e.g. "<value>*<value>"
    """
    formatted = []
    run = 0
    for char in value:
        if char == VALUE_WILDCARD:
            if run > 0:
                formatted.append(VALUE_PLACEHOLDER)
            formatted.append(char)
            run = 0
        else:
            run += 1
    if run > 0:
        formatted.append(VALUE_PLACEHOLDER)
    return ''.join(formatted)


@dataclass
class FilterComponent:
    """One (attribute=value) term of a filter.

    prefix holds the text between the end of the previous term and the
    start of the attribute, opening parenthesis included.
    """
    prefix: str
    attribute: str
    value: str
    normalized_value: str = field(init=False)

    def __post_init__(self):
        self.normalized_value = format_value(self.value)

    @property
    def normalized(self) -> str:
        return f"({self.attribute}={self.normalized_value})"


def extract_components(raw_filter: str,
                       pattern: Optional[Pattern] = None) -> Tuple[List[FilterComponent], str]:
    """Walk a filter left to right and collect its (attribute=value) terms.

    The walk is not recursive, a value runs up to the next closing
    parenthesis whatever it contains.

    :param raw_filter: the filter as logged
    :type raw_filter: str
    :param pattern: compiled component pattern, defaults to the built-in one
    :returns: tuple of the component list and the trailing unmatched text
    """
    if pattern is None:
        pattern = compile_component_pattern()

    components = []
    cursor = 0
    while True:
        match = pattern.search(raw_filter, cursor)
        if match is None:
            break
        components.append(FilterComponent(
            prefix=raw_filter[cursor:match.start('attribute')],
            attribute=match.group('attribute'),
            value=match.group('value'),
        ))
        cursor = match.end()

    return components, raw_filter[cursor:]


@dataclass
class NormalizedFilter:
    raw: str
    components: List[FilterComponent] = field(default_factory=list)
    trailing: str = ''

    @classmethod
    def from_raw(cls, raw_filter: str, pattern: Optional[Pattern] = None):
        components, trailing = extract_components(raw_filter, pattern)
        return cls(raw=raw_filter, components=components, trailing=trailing)

    @property
    def full_filter(self) -> str:
        """The whole filter with every value normalised"""
        parts = []
        for comp in self.components:
            # prefix already carries the opening parenthesis
            parts.append(f"{comp.prefix}{comp.attribute}={comp.normalized_value})")
        parts.append(self.trailing)
        return ''.join(parts)

    @property
    def normalized_components(self) -> List[str]:
        return [comp.normalized for comp in self.components]


def normalize_filter(raw_filter: str) -> str:
    """Return the normalised form of a whole filter string."""
    return NormalizedFilter.from_raw(raw_filter).full_filter
