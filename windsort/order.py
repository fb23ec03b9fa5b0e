"""
WindSort Order Table

The canonical utility-class ordering. Every known class name maps to an
integer rank; lower ranks sort earlier. The default table follows the order
in which Tailwind CSS emits its utilities and is generated from the scale
dictionaries below rather than typed out class by class.
"""

import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

# Sorts after every real rank.
UNRANKED: int = sys.maxsize


# ═══════════════════════════════════════════════════════════════════════════
# SCALES
# ═══════════════════════════════════════════════════════════════════════════

SPACING: Tuple[str, ...] = (
    "0", "px", "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "7",
    "8", "9", "10", "11", "12", "14", "16", "20", "24", "28", "32", "36", "40",
    "44", "48", "52", "56", "60", "64", "72", "80", "96",
)

FRACTIONS: Tuple[str, ...] = (
    "1/2", "1/3", "2/3", "1/4", "2/4", "3/4", "1/5", "2/5", "3/5", "4/5",
    "1/6", "2/6", "3/6", "4/6", "5/6",
)

TWELFTHS: Tuple[str, ...] = tuple(f"{n}/12" for n in range(1, 12))

COLOR_FAMILIES: Tuple[str, ...] = (
    "slate", "gray", "zinc", "neutral", "stone", "red", "orange", "amber",
    "yellow", "lime", "green", "emerald", "teal", "cyan", "sky", "blue",
    "indigo", "violet", "purple", "fuchsia", "pink", "rose",
)

SHADES: Tuple[str, ...] = (
    "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
)

COLORS: Tuple[str, ...] = (
    ("inherit", "current", "transparent", "black", "white")
    + tuple(f"{family}-{shade}" for family in COLOR_FAMILIES for shade in SHADES)
)

SIZES: Tuple[str, ...] = (
    "xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl",
    "8xl", "9xl",
)

BREAKPOINTS: Tuple[str, ...] = ("sm", "md", "lg", "xl", "2xl")

OPACITY: Tuple[str, ...] = tuple(str(n) for n in range(0, 101, 5))

WIDTHS: Tuple[str, ...] = ("0", "1", "2", "4", "8")

POSITIONS: Tuple[str, ...] = (
    "bottom", "center", "left", "left-bottom", "left-top", "right",
    "right-bottom", "right-top", "top",
)

BLEND_MODES: Tuple[str, ...] = (
    "normal", "multiply", "screen", "overlay", "darken", "lighten",
    "color-dodge", "color-burn", "hard-light", "soft-light", "difference",
    "exclusion", "hue", "saturation", "color", "luminosity",
)


def _scale(prefix: str, values: Iterable[str]) -> List[str]:
    """Expand ``prefix`` over ``values`` (``p`` + ``4`` -> ``p-4``)"""
    return [f"{prefix}-{value}" for value in values]


def _bare(prefix: str, values: Iterable[str]) -> List[str]:
    """Like ``_scale`` but ``DEFAULT`` stands for the bare prefix"""
    return [prefix if value == "DEFAULT" else f"{prefix}-{value}" for value in values]


# ═══════════════════════════════════════════════════════════════════════════
# UTILITY FAMILIES
# ═══════════════════════════════════════════════════════════════════════════

# Each family is (class names in order, arbitrary-value bases). A base such
# as "w-" accepts "w-[...]" and ranks right after the family's last name.
Family = Tuple[List[str], Tuple[str, ...]]


def _spacing_families(prefixes: Sequence[str], extra: Sequence[str] = ()) -> List[Family]:
    return [
        (_scale(prefix, SPACING) + _scale(prefix, extra), (f"{prefix}-",))
        for prefix in prefixes
    ]


def _default_families() -> List[Family]:
    inset_values = SPACING + ("auto", "full") + FRACTIONS[:4]
    families: List[Family] = [
        # Layout
        (["container"], ()),
        (["sr-only", "not-sr-only"], ()),
        (["pointer-events-none", "pointer-events-auto"], ()),
        (["visible", "invisible", "collapse"], ()),
        (["static", "fixed", "absolute", "relative", "sticky"], ()),
    ]
    for prefix in ("inset", "inset-x", "inset-y", "start", "end", "top", "right", "bottom", "left"):
        families.append((_scale(prefix, inset_values), (f"{prefix}-",)))
    families += [
        (["isolate", "isolation-auto"], ()),
        (_scale("z", ("0", "10", "20", "30", "40", "50", "auto")), ("z-",)),
        (_scale("order", [str(n) for n in range(1, 13)] + ["first", "last", "none"]), ("order-",)),
        (
            ["col-auto"]
            + _scale("col-span", [str(n) for n in range(1, 13)] + ["full"])
            + _scale("col-start", [str(n) for n in range(1, 14)] + ["auto"])
            + _scale("col-end", [str(n) for n in range(1, 14)] + ["auto"]),
            ("col-", "col-span-", "col-start-", "col-end-"),
        ),
        (
            ["row-auto"]
            + _scale("row-span", [str(n) for n in range(1, 13)] + ["full"])
            + _scale("row-start", [str(n) for n in range(1, 14)] + ["auto"])
            + _scale("row-end", [str(n) for n in range(1, 14)] + ["auto"]),
            ("row-", "row-span-", "row-start-", "row-end-"),
        ),
        (_scale("float", ("right", "left", "none", "start", "end")), ()),
        (_scale("clear", ("left", "right", "both", "none", "start", "end")), ()),
    ]
    families += _spacing_families(
        ("m", "mx", "my", "ms", "me", "mt", "mr", "mb", "ml"), extra=("auto",)
    )
    families += [
        (["box-border", "box-content"], ()),
        (_scale("line-clamp", ("1", "2", "3", "4", "5", "6", "none")), ("line-clamp-",)),
        (
            [
                "block", "inline-block", "inline", "flex", "inline-flex", "table",
                "inline-table", "table-caption", "table-cell", "table-column",
                "table-column-group", "table-footer-group", "table-header-group",
                "table-row-group", "table-row", "flow-root", "grid", "inline-grid",
                "contents", "list-item", "hidden",
            ],
            (),
        ),
        (_scale("aspect", ("auto", "square", "video")), ("aspect-",)),
        (_scale("size", SPACING + ("auto", "full", "min", "max", "fit")), ("size-",)),
        (
            _scale("h", SPACING + ("auto",) + FRACTIONS
                   + ("full", "screen", "svh", "lvh", "dvh", "min", "max", "fit")),
            ("h-",),
        ),
        (_scale("max-h", SPACING + ("none", "full", "screen", "svh", "lvh", "dvh", "min", "max", "fit")), ("max-h-",)),
        (_scale("min-h", SPACING + ("full", "screen", "svh", "lvh", "dvh", "min", "max", "fit")), ("min-h-",)),
        (
            _scale("w", SPACING + ("auto",) + FRACTIONS + TWELFTHS
                   + ("full", "screen", "svw", "lvw", "dvw", "min", "max", "fit")),
            ("w-",),
        ),
        (_scale("min-w", SPACING + ("full", "min", "max", "fit")), ("min-w-",)),
        (
            _scale("max-w", ("0", "none", "xs", "sm", "md", "lg", "xl", "2xl", "3xl",
                             "4xl", "5xl", "6xl", "7xl", "full", "min", "max", "fit", "prose")
                   + tuple(f"screen-{bp}" for bp in BREAKPOINTS)),
            ("max-w-",),
        ),
        (_scale("flex", ("1", "auto", "initial", "none")), ()),
        (["flex-shrink", "flex-shrink-0", "shrink", "shrink-0"], ("shrink-",)),
        (["flex-grow", "flex-grow-0", "grow", "grow-0"], ("grow-",)),
        (_scale("basis", SPACING + ("auto",) + FRACTIONS + TWELFTHS + ("full",)), ("basis-",)),
        (["table-auto", "table-fixed"], ()),
        (["caption-top", "caption-bottom"], ()),
        (["border-collapse", "border-separate"], ()),
        (
            _scale("border-spacing", SPACING)
            + _scale("border-spacing-x", SPACING)
            + _scale("border-spacing-y", SPACING),
            ("border-spacing-",),
        ),
        (
            _scale("origin", ("center", "top", "top-right", "right", "bottom-right",
                              "bottom", "bottom-left", "left", "top-left")),
            ("origin-",),
        ),
        (
            _scale("translate-x", SPACING + FRACTIONS[:4] + ("full",))
            + _scale("translate-y", SPACING + FRACTIONS[:4] + ("full",)),
            ("translate-x-", "translate-y-"),
        ),
        (_scale("rotate", ("0", "1", "2", "3", "6", "12", "45", "90", "180")), ("rotate-",)),
        (
            _scale("skew-x", ("0", "1", "2", "3", "6", "12"))
            + _scale("skew-y", ("0", "1", "2", "3", "6", "12")),
            ("skew-x-", "skew-y-"),
        ),
        (
            _scale("scale", ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150"))
            + _scale("scale-x", ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150"))
            + _scale("scale-y", ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150")),
            ("scale-", "scale-x-", "scale-y-"),
        ),
        (["transform", "transform-cpu", "transform-gpu", "transform-none"], ()),
        (_scale("animate", ("none", "spin", "ping", "pulse", "bounce")), ("animate-",)),
        (
            _scale("cursor", (
                "auto", "default", "pointer", "wait", "text", "move", "help",
                "not-allowed", "none", "context-menu", "progress", "cell",
                "crosshair", "vertical-text", "alias", "copy", "no-drop", "grab",
                "grabbing", "all-scroll", "col-resize", "row-resize", "n-resize",
                "e-resize", "s-resize", "w-resize", "ne-resize", "nw-resize",
                "se-resize", "sw-resize", "ew-resize", "ns-resize",
                "nesw-resize", "nwse-resize", "zoom-in", "zoom-out",
            )),
            ("cursor-",),
        ),
        (
            _scale("touch", ("auto", "none", "pan-x", "pan-left", "pan-right", "pan-y",
                             "pan-up", "pan-down", "pinch-zoom", "manipulation")),
            (),
        ),
        (_scale("select", ("none", "text", "all", "auto")), ()),
        (["resize-none", "resize-y", "resize-x", "resize"], ()),
        (_scale("snap", ("none", "x", "y", "both", "mandatory", "proximity")), ()),
        (_scale("snap", ("start", "end", "center", "align-none", "normal", "always")), ()),
    ]
    families += _spacing_families(
        ("scroll-m", "scroll-mx", "scroll-my", "scroll-mt", "scroll-mr", "scroll-mb", "scroll-ml")
    )
    families += _spacing_families(
        ("scroll-p", "scroll-px", "scroll-py", "scroll-pt", "scroll-pr", "scroll-pb", "scroll-pl")
    )
    families += [
        (["list-inside", "list-outside"], ()),
        (["list-none", "list-disc", "list-decimal"], ("list-",)),
        (["list-image-none"], ("list-image-",)),
        (["appearance-none", "appearance-auto"], ()),
        (
            _scale("columns", [str(n) for n in range(1, 13)]
                   + ["auto", "3xs", "2xs", "xs", "sm", "md", "lg", "xl", "2xl",
                      "3xl", "4xl", "5xl", "6xl", "7xl"]),
            ("columns-",),
        ),
        (_scale("break-before", ("auto", "avoid", "all", "avoid-page", "page", "left", "right", "column")), ()),
        (_scale("break-inside", ("auto", "avoid", "avoid-page", "avoid-column")), ()),
        (_scale("break-after", ("auto", "avoid", "all", "avoid-page", "page", "left", "right", "column")), ()),
        (_scale("auto-cols", ("auto", "min", "max", "fr")), ("auto-cols-",)),
        (_scale("grid-flow", ("row", "col", "dense", "row-dense", "col-dense")), ()),
        (_scale("auto-rows", ("auto", "min", "max", "fr")), ("auto-rows-",)),
        (_scale("grid-cols", [str(n) for n in range(1, 13)] + ["none", "subgrid"]), ("grid-cols-",)),
        (_scale("grid-rows", [str(n) for n in range(1, 13)] + ["none", "subgrid"]), ("grid-rows-",)),
        (["flex-row", "flex-row-reverse", "flex-col", "flex-col-reverse"], ()),
        (["flex-wrap", "flex-wrap-reverse", "flex-nowrap"], ()),
        (_scale("place-content", ("center", "start", "end", "between", "around", "evenly", "baseline", "stretch")), ()),
        (_scale("place-items", ("start", "end", "center", "baseline", "stretch")), ()),
        (_scale("content", ("normal", "center", "start", "end", "between", "around", "evenly", "baseline", "stretch")), ()),
        (_scale("items", ("start", "end", "center", "baseline", "stretch")), ()),
        (_scale("justify", ("normal", "start", "end", "center", "between", "around", "evenly", "stretch")), ()),
        (_scale("justify-items", ("start", "end", "center", "stretch")), ()),
        (_scale("gap", SPACING), ("gap-",)),
        (_scale("gap-x", SPACING), ("gap-x-",)),
        (_scale("gap-y", SPACING), ("gap-y-",)),
        (_scale("space-x", SPACING) + ["space-x-reverse"], ("space-x-",)),
        (_scale("space-y", SPACING) + ["space-y-reverse"], ("space-y-",)),
        (
            _bare("divide-x", ("DEFAULT",) + WIDTHS) + ["divide-x-reverse"]
            + _bare("divide-y", ("DEFAULT",) + WIDTHS) + ["divide-y-reverse"],
            ("divide-x-", "divide-y-"),
        ),
        (_scale("divide", ("solid", "dashed", "dotted", "double", "none")), ()),
        (_scale("divide", COLORS), ("divide-",)),
        (_scale("divide-opacity", OPACITY), ()),
        (_scale("place-self", ("auto", "start", "end", "center", "stretch")), ()),
        (_scale("self", ("auto", "start", "end", "center", "stretch", "baseline")), ()),
        (_scale("justify-self", ("auto", "start", "end", "center", "stretch")), ()),
        (
            _scale("overflow", ("auto", "hidden", "clip", "visible", "scroll"))
            + _scale("overflow-x", ("auto", "hidden", "clip", "visible", "scroll"))
            + _scale("overflow-y", ("auto", "hidden", "clip", "visible", "scroll")),
            (),
        ),
        (
            _scale("overscroll", ("auto", "contain", "none"))
            + _scale("overscroll-x", ("auto", "contain", "none"))
            + _scale("overscroll-y", ("auto", "contain", "none")),
            (),
        ),
        (["scroll-auto", "scroll-smooth"], ()),
        (["truncate", "text-ellipsis", "text-clip"], ()),
        (_scale("hyphens", ("none", "manual", "auto")), ()),
        (_scale("whitespace", ("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces")), ()),
        (["text-wrap", "text-nowrap", "text-balance", "text-pretty"], ()),
        (["break-normal", "break-words", "break-all", "break-keep"], ()),
    ]
    radius = ("DEFAULT", "none", "sm", "md", "lg", "xl", "2xl", "3xl", "full")
    for prefix in ("rounded", "rounded-s", "rounded-e", "rounded-t", "rounded-r",
                   "rounded-b", "rounded-l", "rounded-ss", "rounded-se",
                   "rounded-ee", "rounded-es", "rounded-tl", "rounded-tr",
                   "rounded-br", "rounded-bl"):
        families.append((_bare(prefix, radius), (f"{prefix}-",)))
    for prefix in ("border", "border-x", "border-y", "border-s", "border-e",
                   "border-t", "border-r", "border-b", "border-l"):
        families.append((_bare(prefix, ("DEFAULT",) + WIDTHS), (f"{prefix}-",)))
    families += [
        (_scale("border", ("solid", "dashed", "dotted", "double", "hidden", "none")), ()),
        (_scale("border", COLORS), ()),
    ]
    for prefix in ("border-x", "border-y", "border-s", "border-e", "border-t",
                   "border-r", "border-b", "border-l"):
        families.append((_scale(prefix, COLORS), ()))
    families += [
        (_scale("border-opacity", OPACITY), ()),
        (_scale("bg", COLORS), ("bg-",)),
        (_scale("bg-opacity", OPACITY), ()),
        (["bg-none"] + _scale("bg-gradient-to", ("t", "tr", "r", "br", "b", "bl", "l", "tl")), ()),
        (_scale("from", COLORS), ("from-",)),
        (_scale("via", COLORS), ("via-",)),
        (_scale("to", COLORS), ("to-",)),
        (["box-decoration-clone", "box-decoration-slice", "decoration-clone", "decoration-slice"], ()),
        (["bg-auto", "bg-cover", "bg-contain"], ()),
        (["bg-fixed", "bg-local", "bg-scroll"], ()),
        (_scale("bg-clip", ("border", "padding", "content", "text")), ()),
        (_scale("bg", POSITIONS), ()),
        (_scale("bg", ("repeat", "no-repeat", "repeat-x", "repeat-y", "repeat-round", "repeat-space")), ()),
        (_scale("bg-origin", ("border", "padding", "content")), ()),
        (["fill-none"] + _scale("fill", COLORS), ("fill-",)),
        (["stroke-none"] + _scale("stroke", COLORS), ()),
        (_scale("stroke", ("0", "1", "2")), ("stroke-",)),
        (_scale("object", ("contain", "cover", "fill", "none", "scale-down")), ()),
        (_scale("object", POSITIONS), ("object-",)),
    ]
    families += _spacing_families(("p", "px", "py", "ps", "pe", "pt", "pr", "pb", "pl"))
    families += [
        (_scale("text", ("left", "center", "right", "justify", "start", "end")), ()),
        (_scale("indent", SPACING), ("indent-",)),
        (_scale("align", ("baseline", "top", "middle", "bottom", "text-top", "text-bottom", "sub", "super")), ("align-",)),
        (_scale("font", ("sans", "serif", "mono")), ()),
        (_scale("text", SIZES), ("text-",)),
        (
            _scale("font", ("thin", "extralight", "light", "normal", "medium",
                            "semibold", "bold", "extrabold", "black")),
            ("font-",),
        ),
        (["uppercase", "lowercase", "capitalize", "normal-case"], ()),
        (["italic", "not-italic"], ()),
        (
            ["normal-nums", "ordinal", "slashed-zero", "lining-nums", "oldstyle-nums",
             "proportional-nums", "tabular-nums", "diagonal-fractions", "stacked-fractions"],
            (),
        ),
        (
            _scale("leading", ("3", "4", "5", "6", "7", "8", "9", "10", "none",
                               "tight", "snug", "normal", "relaxed", "loose")),
            ("leading-",),
        ),
        (_scale("tracking", ("tighter", "tight", "normal", "wide", "wider", "widest")), ("tracking-",)),
        (_scale("text", COLORS), ()),
        (_scale("text-opacity", OPACITY), ()),
        (["underline", "overline", "line-through", "no-underline"], ()),
        (_scale("decoration", COLORS), ("decoration-",)),
        (_scale("decoration", ("solid", "double", "dotted", "dashed", "wavy")), ()),
        (_scale("decoration", ("auto", "from-font") + WIDTHS), ()),
        (_scale("underline-offset", ("auto",) + WIDTHS), ("underline-offset-",)),
        (["antialiased", "subpixel-antialiased"], ()),
        (_scale("placeholder", COLORS), ("placeholder-",)),
        (_scale("caret", COLORS), ("caret-",)),
        (["accent-auto"] + _scale("accent", COLORS), ("accent-",)),
        (_scale("opacity", OPACITY), ("opacity-",)),
        (_scale("bg-blend", BLEND_MODES), ()),
        (_scale("mix-blend", BLEND_MODES + ("plus-lighter",)), ()),
        (_bare("shadow", ("sm", "DEFAULT", "md", "lg", "xl", "2xl", "inner", "none")), ("shadow-",)),
        (_scale("shadow", COLORS), ()),
        (["outline-none", "outline", "outline-dashed", "outline-dotted", "outline-double"], ()),
        (_scale("outline", WIDTHS), ("outline-",)),
        (_scale("outline-offset", WIDTHS), ("outline-offset-",)),
        (_scale("outline", COLORS), ()),
        (["ring-0", "ring-1", "ring-2", "ring", "ring-4", "ring-8", "ring-inset"], ("ring-",)),
        (_scale("ring", COLORS), ()),
        (_scale("ring-opacity", OPACITY), ()),
        (_scale("ring-offset", WIDTHS), ("ring-offset-",)),
        (_scale("ring-offset", COLORS), ()),
        (_bare("blur", ("none", "sm", "DEFAULT", "md", "lg", "xl", "2xl", "3xl")), ("blur-",)),
        (_scale("brightness", ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150", "200")), ("brightness-",)),
        (_scale("contrast", ("0", "50", "75", "100", "125", "150", "200")), ("contrast-",)),
        (_bare("drop-shadow", ("sm", "DEFAULT", "md", "lg", "xl", "2xl", "none")), ("drop-shadow-",)),
        (["grayscale-0", "grayscale"], ("grayscale-",)),
        (_scale("hue-rotate", ("0", "15", "30", "60", "90", "180")), ("hue-rotate-",)),
        (["invert-0", "invert"], ("invert-",)),
        (_scale("saturate", ("0", "50", "100", "150", "200")), ("saturate-",)),
        (["sepia-0", "sepia"], ("sepia-",)),
        (["filter", "filter-none"], ()),
        (_bare("backdrop-blur", ("none", "sm", "DEFAULT", "md", "lg", "xl", "2xl", "3xl")), ("backdrop-blur-",)),
        (_scale("backdrop-brightness", ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150", "200")), ("backdrop-brightness-",)),
        (_scale("backdrop-contrast", ("0", "50", "75", "100", "125", "150", "200")), ("backdrop-contrast-",)),
        (["backdrop-grayscale-0", "backdrop-grayscale"], ()),
        (_scale("backdrop-hue-rotate", ("0", "15", "30", "60", "90", "180")), ("backdrop-hue-rotate-",)),
        (["backdrop-invert-0", "backdrop-invert"], ()),
        (_scale("backdrop-opacity", OPACITY), ("backdrop-opacity-",)),
        (_scale("backdrop-saturate", ("0", "50", "100", "150", "200")), ("backdrop-saturate-",)),
        (["backdrop-sepia-0", "backdrop-sepia"], ()),
        (["backdrop-filter", "backdrop-filter-none"], ()),
        (_bare("transition", ("none", "all", "DEFAULT", "colors", "opacity", "shadow", "transform")), ("transition-",)),
        (_scale("delay", ("0", "75", "100", "150", "200", "300", "500", "700", "1000")), ("delay-",)),
        (_scale("duration", ("0", "75", "100", "150", "200", "300", "500", "700", "1000")), ("duration-",)),
        (_scale("ease", ("linear", "in", "out", "in-out")), ("ease-",)),
        (_scale("will-change", ("auto", "scroll", "contents", "transform")), ("will-change-",)),
        (["content-none"], ("content-",)),
        (_scale("forced-color-adjust", ("auto", "none")), ()),
    ]
    return families


# ═══════════════════════════════════════════════════════════════════════════
# ORDER TABLE
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class OrderEntry:
    """One row of the order table"""

    pattern: str
    rank: int


@dataclass(frozen=True, eq=False)
class OrderTable:
    """
    Read-only class name -> rank mapping.

    ``exact`` holds full class names. ``arbitrary`` holds bases such as
    ``w-[`` that match ``w-[<anything>]``.
    """

    exact: Mapping[str, int]
    arbitrary: Mapping[str, int]

    def __len__(self) -> int:
        return len(self.exact)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self.exact

    @property
    def size(self) -> int:
        """One past the highest rank in the table"""
        ranks = list(self.exact.values()) + list(self.arbitrary.values())
        return max(ranks) + 1 if ranks else 0

    def lookup(self, base: str) -> Optional[int]:
        """Exact lookup of an already stripped utility name"""
        return self.exact.get(base)

    def lookup_arbitrary(self, base: str) -> Optional[int]:
        """
        Rank of an arbitrary-value utility like ``top-[3px]``.

        The bracket content is ignored; only the name up to and including
        ``[`` is matched.
        """
        if not base.endswith("]"):
            return None
        bracket = base.find("[")
        if bracket <= 0:
            return None
        return self.arbitrary.get(base[:bracket + 1])

    def entries(self) -> List[OrderEntry]:
        """All entries ordered by rank"""
        rows = [OrderEntry(name, rank) for name, rank in self.exact.items()]
        rows += [OrderEntry(f"{base}]", rank) for base, rank in self.arbitrary.items()]
        return sorted(rows, key=lambda entry: entry.rank)

    def extend(self, class_names: Iterable[str]) -> "OrderTable":
        """Return a new table with ``class_names`` ranked after everything here"""
        exact = dict(self.exact)
        next_rank = self.size
        for name in class_names:
            if name not in exact:
                exact[name] = next_rank
                next_rank += 1
        return OrderTable(MappingProxyType(exact), self.arbitrary)


def build_order_table(families: Iterable[Family]) -> OrderTable:
    """
    Flatten utility families into an ``OrderTable``.

    Ranks are assigned in iteration order. A name seen twice keeps its
    first rank. Every arbitrary base of a family shares one slot placed
    after the family's names.
    """
    exact: dict = {}
    arbitrary: dict = {}
    rank = 0

    for names, bases in families:
        for name in names:
            if name not in exact:
                exact[name] = rank
                rank += 1
        if bases:
            for base in bases:
                arbitrary.setdefault(f"{base}[", rank)
            rank += 1

    return OrderTable(MappingProxyType(exact), MappingProxyType(arbitrary))


def table_from_names(class_names: Iterable[str]) -> OrderTable:
    """Build a table that ranks exactly ``class_names`` in the given order"""
    return build_order_table([(list(class_names), ())])


DEFAULT_ORDER_TABLE: OrderTable = build_order_table(_default_families())
