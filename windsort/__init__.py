"""
WindSort - Utility Class Sorting

Rewrites the class lists found in class="..." and className="..."
attributes so that utility classes always appear in one canonical order.
"""

__version__ = "1.0.0"
__author__ = "WindSort Contributors"

from windsort.config import Config, Settings, WriteMode, load_config
from windsort.engine import WindSort
from windsort.extractor import ClassExtractor, Span, find_spans, has_classes
from windsort.order import DEFAULT_ORDER_TABLE, UNRANKED, OrderTable
from windsort.ranker import rank_of
from windsort.reassembler import apply
from windsort.sorter import sort_classes, sort_file_contents, sort_spans, sort_tokens
from windsort.tokenizer import Token, tokenize

__all__ = [
    "WindSort",
    "Config",
    "Settings",
    "WriteMode",
    "load_config",
    "ClassExtractor",
    "Span",
    "find_spans",
    "has_classes",
    "OrderTable",
    "DEFAULT_ORDER_TABLE",
    "UNRANKED",
    "rank_of",
    "Token",
    "tokenize",
    "sort_tokens",
    "sort_classes",
    "sort_file_contents",
    "sort_spans",
    "apply",
    "__version__",
]
