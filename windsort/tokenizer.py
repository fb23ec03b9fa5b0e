"""
WindSort Tokenizer

Splits the inner text of a class attribute into ranked tokens.
"""

from dataclasses import dataclass
from typing import List, Optional

from windsort.order import UNRANKED, OrderTable
from windsort.ranker import rank_of


@dataclass(frozen=True)
class Token:
    """A single class name exactly as written, with its resolved rank"""

    raw: str
    rank: int = UNRANKED

    @property
    def is_ranked(self) -> bool:
        return self.rank != UNRANKED

    def __str__(self) -> str:
        return self.raw


def tokenize(span_inner: str, table: Optional[OrderTable] = None) -> List[Token]:
    """
    Split class attribute text on runs of whitespace.

    Args:
        span_inner: Text between the attribute quotes
        table: Order table used to rank each token

    Returns:
        Tokens in their original left-to-right order; empty for blank input
    """
    return [Token(raw, rank_of(raw, table)) for raw in span_inner.split()]
