"""
Regular expression backend for JSRegExp.

Translates JavaScript pattern syntax to Python's ``re`` dialect and layers
the JavaScript ``lastIndex`` protocol for the global and sticky flags on top.
"""

import re
from typing import Dict, List, Optional

from .errors import RegExpError


__all__ = ['RegExp', 'RegExpError', 'MatchResult', 'FLAG_ORDER', 'normalize_flags']

# Canonical order used by RegExp.prototype.flags
FLAG_ORDER = "dgimsuy"


def normalize_flags(flags: str) -> str:
    """Validate a flags string and return it in canonical order."""
    seen = set()
    for flag in flags:
        if flag not in FLAG_ORDER:
            raise RegExpError(f"Invalid regular expression flags '{flags}'")
        if flag in seen:
            raise RegExpError(f"Duplicate flag '{flag}' in '{flags}'")
        seen.add(flag)
    return "".join(f for f in FLAG_ORDER if f in seen)


def _translate(pattern: str, multiline: bool) -> str:
    """Rewrite JavaScript-only syntax into the equivalent ``re`` syntax."""
    out: List[str] = []
    i = 0
    in_class = False
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\" and i + 1 < n:
            nxt = pattern[i + 1]
            if nxt == "k" and not in_class and pattern.startswith("<", i + 2):
                end = pattern.find(">", i + 3)
                if end != -1:
                    out.append(f"(?P={pattern[i + 3:end]})")
                    i = end + 1
                    continue
            if nxt == "d" and not in_class:
                out.append("[0-9]")
            elif nxt == "D" and not in_class:
                out.append("[^0-9]")
            else:
                out.append(pattern[i:i + 2])
            i += 2
            continue
        if in_class:
            if ch == "]":
                in_class = False
            out.append(ch)
            i += 1
            continue
        if ch == "[":
            # [] never matches and [^] matches anything in JavaScript
            if pattern.startswith("[]", i):
                out.append("(?!)")
                i += 2
                continue
            if pattern.startswith("[^]", i):
                out.append(r"[\s\S]")
                i += 3
                continue
            in_class = True
            out.append(ch)
            i += 1
            continue
        if ch == "(" and pattern.startswith("(?<", i) and not (
            pattern.startswith("(?<=", i) or pattern.startswith("(?<!", i)
        ):
            out.append("(?P<")
            i += 3
            continue
        if ch == "$" and not multiline:
            out.append(r"\Z")
            i += 1
            continue
        out.append(ch)
        i += 1
    return "".join(out)


class MatchResult:
    """Result of a successful exec(): captured groups plus match position."""

    def __init__(self, groups: List[Optional[str]], index: int, input: str,
                 named: Optional[Dict[str, Optional[str]]] = None):
        self._groups = groups
        self.index = index
        self.input = input
        self.named = named or {}

    def __getitem__(self, idx: int) -> Optional[str]:
        return self._groups[idx]

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self):
        return iter(self._groups)

    def __repr__(self) -> str:
        return f"MatchResult({self._groups!r}, index={self.index})"


class RegExp:
    """
    JavaScript-compatible regular expression object.

    ``lastIndex`` is honoured and updated only when the global or sticky
    flag is set, matching RegExp.prototype.exec.
    """

    def __init__(self, pattern: str, flags: str = ""):
        self.source = pattern
        self.flags = normalize_flags(flags)
        self._global = 'g' in self.flags
        self._ignore_case = 'i' in self.flags
        self._multiline = 'm' in self.flags
        self._dotall = 's' in self.flags
        self._unicode = 'u' in self.flags
        self._sticky = 'y' in self.flags
        self._has_indices = 'd' in self.flags
        self.lastIndex = 0

        re_flags = 0
        if self._ignore_case:
            re_flags |= re.IGNORECASE
        if self._multiline:
            re_flags |= re.MULTILINE
        if self._dotall:
            re_flags |= re.DOTALL
        if not self._unicode:
            re_flags |= re.ASCII

        try:
            self._compiled = re.compile(_translate(pattern, self._multiline), re_flags)
        except re.error as e:
            raise RegExpError(f"Invalid regular expression: /{pattern}/: {e}") from e

    @property
    def global_(self):
        return self._global

    @property
    def ignoreCase(self):
        return self._ignore_case

    @property
    def multiline(self):
        return self._multiline

    @property
    def dotAll(self):
        return self._dotall

    @property
    def unicode(self):
        return self._unicode

    @property
    def sticky(self):
        return self._sticky

    @property
    def hasIndices(self):
        return self._has_indices

    def test(self, string: str) -> bool:
        """
        Test if the pattern matches the string.

        Args:
            string: The string to test

        Returns:
            True if there's a match, False otherwise
        """
        return self.exec(string) is not None

    def exec(self, string: str) -> Optional[MatchResult]:
        """
        Execute a search for a match.

        Args:
            string: The string to search

        Returns:
            Match array or None if no match
        """
        uses_last_index = self._global or self._sticky
        start = self.lastIndex if uses_last_index else 0

        if start > len(string):
            self.lastIndex = 0
            return None

        if self._sticky:
            m = self._compiled.match(string, start)
        else:
            m = self._compiled.search(string, start)

        if m is None:
            if uses_last_index:
                self.lastIndex = 0
            return None

        if uses_last_index:
            self.lastIndex = m.end()

        groups = [m.group(0)] + list(m.groups())
        return MatchResult(groups, m.start(), string, m.groupdict())
