"""
WindSort Reassembler

Splices sorted class lists back into file content.
"""

from typing import Iterable, List

from windsort.extractor import Span


def apply(content: str, spans: Iterable[Span], replacements: Iterable[str]) -> str:
    """
    Replace each span's range in ``content`` with its replacement.

    Everything outside the spans is copied through unchanged.

    Args:
        content: Original file content
        spans: Non-overlapping spans in left-to-right order
        replacements: New inner text for each span, in the same order

    Returns:
        The rewritten content

    Raises:
        ValueError: If the spans are out of order, overlap, fall outside
            the content, or do not pair up with the replacements
    """
    spans = list(spans)
    replacements = list(replacements)
    if len(spans) != len(replacements):
        raise ValueError(
            f"Got {len(spans)} spans but {len(replacements)} replacements"
        )

    pieces: List[str] = []
    cursor = 0

    for span, replacement in zip(spans, replacements):
        if span.start < cursor or span.end < span.start or span.end > len(content):
            raise ValueError(f"Span {span.start}:{span.end} is out of order or out of range")
        pieces.append(content[cursor:span.start])
        pieces.append(replacement)
        cursor = span.end

    pieces.append(content[cursor:])
    return "".join(pieces)
