"""
WindSort Class Ranker

Resolves a raw class token to its rank in an order table. Variant prefixes
(``md:``, ``hover:``, ``dark:``), the important marker, negative values,
opacity modifiers and arbitrary values are peeled off so that every form of
a utility ranks like its base name.
"""

from typing import List, Optional, Tuple

from windsort.order import DEFAULT_ORDER_TABLE, UNRANKED, OrderTable


# ═══════════════════════════════════════════════════════════════════════════
# VARIANTS
# ═══════════════════════════════════════════════════════════════════════════

VARIANTS = frozenset({
    # responsive
    "sm", "md", "lg", "xl", "2xl",
    # pseudo-classes
    "hover", "focus", "focus-within", "focus-visible", "active", "visited",
    "target", "disabled", "enabled", "checked", "indeterminate", "default",
    "required", "valid", "invalid", "in-range", "out-of-range",
    "placeholder-shown", "autofill", "read-only", "first", "last", "only",
    "odd", "even", "first-of-type", "last-of-type", "only-of-type", "empty",
    "open",
    # pseudo-elements
    "placeholder", "before", "after", "selection", "marker", "file",
    "first-letter", "first-line", "backdrop",
    # media and features
    "dark", "motion-safe", "motion-reduce", "print", "portrait", "landscape",
    "contrast-more", "contrast-less", "forced-colors", "rtl", "ltr", "*",
})

VARIANT_PREFIXES = (
    "group", "peer", "aria-", "data-", "supports-", "min-", "max-", "has-",
    "not-", "@",
)


def is_variant(prefix: str) -> bool:
    """Check whether ``prefix`` is a recognised variant"""
    if prefix in VARIANTS:
        return True
    if prefix.startswith("[") and prefix.endswith("]"):
        return True
    return prefix.startswith(VARIANT_PREFIXES)


def split_variants(class_name: str) -> Tuple[List[str], str]:
    """
    Split ``md:hover:bg-[url(a:b)]`` into ``(["md", "hover"], "bg-[url(a:b)]")``.

    Colons inside square brackets belong to the value, not the variant list.
    """
    variants: List[str] = []
    depth = 0
    start = 0

    for i, char in enumerate(class_name):
        if char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
        elif char == ":" and depth == 0:
            variants.append(class_name[start:i])
            start = i + 1

    return variants, class_name[start:]


def strip_modifier(base: str) -> Optional[str]:
    """Drop a trailing ``/50`` or ``/[.5]`` modifier, or return None"""
    depth = 0
    for i in range(len(base) - 1, -1, -1):
        char = base[i]
        if char == "]":
            depth += 1
        elif char == "[":
            depth -= 1
        elif char == "/" and depth == 0:
            return base[:i] if i > 0 else None
    return None


def _strip_markers(base: str) -> str:
    if base.startswith("!"):
        base = base[1:]
    elif base.endswith("!"):
        base = base[:-1]
    if base.startswith("-"):
        base = base[1:]
    return base


# ═══════════════════════════════════════════════════════════════════════════
# RANKING
# ═══════════════════════════════════════════════════════════════════════════

def rank_of(class_name: str, table: Optional[OrderTable] = None) -> int:
    """
    Resolve a class name to its rank.

    Args:
        class_name: Raw class token, possibly with variants and modifiers
        table: Order table to rank against (defaults to the Tailwind order)

    Returns:
        Rank of the base utility, or ``UNRANKED`` when nothing matches
    """
    if table is None:
        table = DEFAULT_ORDER_TABLE

    rank = table.lookup(class_name)
    if rank is not None:
        return rank

    variants, base = split_variants(class_name)
    if not base or not all(is_variant(v) for v in variants):
        return UNRANKED

    base = _strip_markers(base)
    rank = table.lookup(base)
    if rank is not None:
        return rank

    stripped = strip_modifier(base)
    if stripped is not None:
        rank = table.lookup(stripped)
        if rank is not None:
            return rank
        base = stripped

    rank = table.lookup_arbitrary(base)
    return UNRANKED if rank is None else rank

