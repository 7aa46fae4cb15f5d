"""Named text-matching rules and the immutable registry that groups them.

Detectors never reach for module-level regex constants directly. Each rubric
builds one ``PatternRegistry`` at import time and detectors receive it as an
argument, so a detector can be exercised against a hand-built registry in
isolation.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Pattern:
    """A named matcher over text. Matching is case-insensitive unless built otherwise."""

    name: str
    regex: re.Pattern[str]

    @classmethod
    def compile(cls, name: str, source: str, flags: int = re.IGNORECASE) -> Pattern:
        return cls(name, re.compile(source, flags))

    @classmethod
    def words(cls, name: str, words: Iterable[str], suffix: str = "") -> Pattern:
        """Match any of ``words`` as whole words, optionally followed by ``suffix``."""
        alternation = "|".join(re.escape(w) for w in words)
        return cls(name, re.compile(rf"(?<!\w)(?:{alternation}){suffix}(?!\w)", re.IGNORECASE))

    @classmethod
    def phrase(cls, name: str, phrase: str) -> Pattern:
        """Match ``phrase`` literally. Multi-word phrases match as substrings."""
        escaped = re.escape(phrase)
        if " " in phrase:
            return cls(name, re.compile(escaped, re.IGNORECASE))
        return cls(name, re.compile(rf"(?<!\w){escaped}(?!\w)", re.IGNORECASE))

    def occurs(self, text: str) -> bool:
        return self.regex.search(text) is not None

    def count(self, text: str) -> int:
        return sum(1 for _ in self.regex.finditer(text))

    def matches(self, text: str) -> list[str]:
        return [m.group(0) for m in self.regex.finditer(text)]

    def first(self, text: str) -> str | None:
        m = self.regex.search(text)
        return m.group(0) if m else None


class PatternRegistry(Mapping[str, Pattern]):
    """Read-only name -> Pattern mapping, built once and shared by every call."""

    def __init__(self, patterns: Iterable[Pattern]) -> None:
        table: dict[str, Pattern] = {}
        for pattern in patterns:
            if pattern.name in table:
                raise ValueError(f"Duplicate pattern name: {pattern.name!r}")
            table[pattern.name] = pattern
        self._patterns = MappingProxyType(table)

    @classmethod
    def of(cls, *patterns: Pattern) -> PatternRegistry:
        return cls(patterns)

    def __getitem__(self, name: str) -> Pattern:
        try:
            return self._patterns[name]
        except KeyError:
            raise KeyError(f"Unknown pattern: {name!r}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def group(self, prefix: str) -> list[Pattern]:
        """Patterns whose names start with ``prefix + '.'``, in registration order."""
        return [p for name, p in self._patterns.items() if name.startswith(prefix + ".")]

    def __repr__(self) -> str:
        return f"PatternRegistry({len(self)} patterns)"
