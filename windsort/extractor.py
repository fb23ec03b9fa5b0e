"""
WindSort Class Extractor

Finds the class-bearing attribute spans in file content. The grammar lives
entirely in this module so that it can grow (or be swapped for a custom
pattern) without touching ranking or sorting.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional, Pattern

from windsort.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    """Half-open range ``[start, end)`` of one attribute's class list"""

    start: int
    end: int
    inner: str


# ═══════════════════════════════════════════════════════════════════════════
# DEFAULT GRAMMAR
# ═══════════════════════════════════════════════════════════════════════════

# Characters that never appear in a plain class list. Anything containing
# them is a template expression or broken quoting and is left alone. Inside
# ``[...]`` the arbitrary-variant selectors ``<`` and ``>`` are allowed.
_CLASS_CHARS = r"""(?:[^"'<>{}`$\[]|\[[^"'{}`$\]]*\])*"""

# An unterminated HTML comment runs to the end of the content. A ``/*``
# opens a comment only at a token boundary, so ``src/*.html`` does not.
_COMMENT = r"<!--.*?(?:-->|\Z)|(?<![^\s{;,(])/\*.*?\*/"

_ATTRIBUTE = (
    r"(?<![\w\-:.@])(?:class|className)\s*=\s*"
    rf"""(?:"(?P<double>{_CLASS_CHARS})"|'(?P<single>{_CLASS_CHARS})')"""
)

DEFAULT_PATTERN: Pattern[str] = re.compile(
    rf"(?P<comment>{_COMMENT})|{_ATTRIBUTE}", re.DOTALL
)


class ClassExtractor:
    """Locates class attribute spans in file content"""

    def __init__(self, custom_regex: Optional[str] = None):
        """
        Args:
            custom_regex: Optional pattern replacing the default grammar;
                its first capture group is the class list
        """
        self.custom_regex = custom_regex
        self.pattern: Optional[Pattern[str]] = None

        if custom_regex:
            if not isinstance(custom_regex, str):
                raise ConfigError(f"Custom regex must be a string, got {custom_regex!r}")
            try:
                self.pattern = re.compile(custom_regex)
            except re.error as e:
                raise ConfigError(f"Invalid custom regex {custom_regex!r}: {e}") from e
            if self.pattern.groups < 1:
                raise ConfigError(
                    f"Custom regex {custom_regex!r} needs a capture group for the class list"
                )

    def find_spans(self, content: str) -> Iterator[Span]:
        """
        Lazily yield class spans in left-to-right order.

        Args:
            content: Whole file content

        Yields:
            Non-overlapping Span objects
        """
        if self.pattern is not None:
            yield from self._find_custom(content)
            return

        for match in DEFAULT_PATTERN.finditer(content):
            if match.group("comment") is not None:
                continue
            group = "double" if match.group("double") is not None else "single"
            yield Span(match.start(group), match.end(group), match.group(group))

    def _find_custom(self, content: str) -> Iterator[Span]:
        for match in self.pattern.finditer(content):
            inner = match.group(1)
            if inner is None:
                continue
            if any(quote in inner for quote in "\"'`"):
                logger.debug(f"Skipping class list with quotes at offset {match.start(1)}")
                continue
            yield Span(match.start(1), match.end(1), inner)

    def has_classes(self, content: str) -> bool:
        """True iff ``find_spans`` yields at least one span"""
        return next(self.find_spans(content), None) is not None


DEFAULT_EXTRACTOR = ClassExtractor()


def find_spans(content: str) -> Iterator[Span]:
    """``ClassExtractor.find_spans`` with the default grammar"""
    return DEFAULT_EXTRACTOR.find_spans(content)


def has_classes(content: str) -> bool:
    """``ClassExtractor.has_classes`` with the default grammar"""
    return DEFAULT_EXTRACTOR.has_classes(content)
