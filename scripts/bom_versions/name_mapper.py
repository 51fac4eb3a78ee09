"""Map candidate property names onto configured canonical names.

The configuration maps a desired property name to a comma-separated list
of regular expressions. A candidate such as ``version.org.jboss.logging``
is renamed to the first configured name with a pattern matching it in
full; unmatched candidates keep their own name.
"""

import re
from typing import Mapping

from .errors import NamePatternError


class NameMapper:
    """Resolve candidate property names against name-pattern configuration.

    Canonical names are consulted in lexicographic order and patterns in
    the order they were configured, so the first match is stable even when
    patterns for different names overlap.
    """

    def __init__(self, merged_properties: Mapping[str, str]):
        entries = []
        for name in sorted(merged_properties):
            patterns = []
            for fragment in merged_properties[name].split(","):
                fragment = fragment.strip()
                if not fragment:
                    continue
                try:
                    patterns.append(re.compile(fragment))
                except re.error as e:
                    raise NamePatternError(name, fragment, str(e)) from e
            entries.append((name, tuple(patterns)))
        self._entries = tuple(entries)

    @property
    def names(self) -> tuple:
        """Configured canonical names in resolution order."""
        return tuple(name for name, _ in self._entries)

    def map_name(self, candidate: str) -> str:
        """Return the canonical name for ``candidate``, or ``candidate`` itself.

        Args:
            candidate: A generated name like ``version.<groupId>`` or
                ``version.<groupId>.<artifactId>``.

        Returns:
            The first configured name with a pattern matching the whole
            candidate, otherwise the candidate unchanged.
        """
        for name, patterns in self._entries:
            for pattern in patterns:
                if pattern.fullmatch(candidate):
                    return name
        return candidate
