"""
WindSort Sorter

Stable ordering of ranked tokens and the whole-content sorting pipeline:
extract spans, tokenize, rank, sort, reassemble.
"""

import logging
from operator import attrgetter
from typing import Iterable, List, Optional, Sequence, Set

from windsort.extractor import DEFAULT_EXTRACTOR, ClassExtractor, Span
from windsort.order import OrderTable
from windsort.reassembler import apply
from windsort.tokenizer import Token, tokenize

logger = logging.getLogger(__name__)


def sort_tokens(tokens: Iterable[Token], remove_duplicates: bool = True) -> List[Token]:
    """
    Order tokens by rank, keeping input order among equal ranks.

    Unranked tokens end up last, in the order they were written.

    Args:
        tokens: Tokens in their original order
        remove_duplicates: Drop repeats of an already kept ``raw`` value

    Returns:
        The sorted token list
    """
    # sorted() is stable, which keeps the input order on ties
    ordered = sorted(tokens, key=attrgetter("rank"))
    if not remove_duplicates:
        return ordered

    seen: Set[str] = set()
    unique: List[Token] = []
    for token in ordered:
        if token.raw in seen:
            continue
        seen.add(token.raw)
        unique.append(token)
    return unique


def sort_classes(
    span_inner: str,
    remove_duplicates: bool = True,
    table: Optional[OrderTable] = None
) -> str:
    """Sort one class list and join it with single spaces"""
    tokens = sort_tokens(tokenize(span_inner, table), remove_duplicates)
    return " ".join(token.raw for token in tokens)


def sort_spans(
    content: str,
    spans: Sequence[Span],
    allow_duplicates: bool = False,
    table: Optional[OrderTable] = None
) -> str:
    """Sort the class lists of already located ``spans`` in ``content``"""
    if not spans:
        return content

    remove_duplicates = not allow_duplicates
    replacements = [sort_classes(span.inner, remove_duplicates, table) for span in spans]
    logger.debug(f"Sorted {len(spans)} class lists")
    return apply(content, spans, replacements)


def sort_file_contents(
    content: str,
    allow_duplicates: bool = False,
    table: Optional[OrderTable] = None,
    extractor: Optional[ClassExtractor] = None
) -> str:
    """
    Sort every class list in ``content``.

    Args:
        content: Whole file content
        allow_duplicates: Keep repeated classes instead of dropping them
        table: Order table (defaults to the Tailwind order)
        extractor: Span finder (defaults to the class/className grammar)

    Returns:
        Content with each class list sorted; identical to ``content`` when
        there is nothing to sort
    """
    if extractor is None:
        extractor = DEFAULT_EXTRACTOR

    return sort_spans(content, list(extractor.find_spans(content)), allow_duplicates, table)
