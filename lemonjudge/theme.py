"""Colour themes used to shade scores in rankings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

HslColor = tuple[float, float, float]
"""Hue, saturation and lightness, each as a fraction between 0 and 1."""


@dataclass
class HslTuple:
    """A colour as hue in degrees and saturation and lightness in percent."""

    h: int = 0
    s: float = 0.0
    l: float = 0.0  # noqa: E741

    def to_color(self) -> HslColor:
        """Return the colour with every component scaled to 0..1."""
        return (self.h / 360.0, self.s / 100.0, self.l / 100.0)


@dataclass
class DddTuple:
    """Three per-component factors for hue, saturation and lightness."""

    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741


def make_per(
    p: float,
    low: float,
    high: float,
    bound: float,
    distance_rate: float = 1.0,
    result_comp: float = 0.0,
) -> float:
    """Interpolate one colour component between ``low`` and ``high`` for ratio ``p``.

    The result is scaled by ``bound``, wrapped into 0..1 and clamped.
    """
    distance = distance_rate * (high - low) / bound / 110.0
    result = (result_comp + low) / bound + 100.0 * p * distance
    if p > 0:
        result += distance * 5
    if p >= 1 - 1e-12:
        result += distance * 5
    while result < -1e-12:
        result += 1
    while result > 1 + 1e-12:
        result -= 1
    return max(0.0, min(result, 1.0))


def _ratio(value: float, total: float | None) -> float:
    if total is None:
        p = float(value)
    else:
        try:
            p = value / total
        except ZeroDivisionError:
            p = 0.0
    if not math.isfinite(p):
        p = 0.0
    return p


@dataclass
class ColorTheme:
    """Colours for the lowest and highest score and for missing or failed sources."""

    name: str = ""
    mx_color: HslTuple = field(default_factory=HslTuple)
    mi_color: HslTuple = field(default_factory=HslTuple)
    nf_color: HslTuple = field(default_factory=HslTuple)
    ce_color: HslTuple = field(default_factory=HslTuple)
    grand_comp: DddTuple = field(default_factory=DddTuple)
    grand_rate: DddTuple = field(default_factory=DddTuple)

    def set_color(
        self,
        mx: HslTuple,
        mi: HslTuple,
        nf: HslTuple,
        ce: HslTuple,
        grand_comp: DddTuple,
        grand_rate: DddTuple,
    ) -> None:
        """Set all colours of the theme at once."""
        self.mx_color = HslTuple(mx.h, mx.s, mx.l)
        self.mi_color = HslTuple(mi.h, mi.s, mi.l)
        self.nf_color = HslTuple(nf.h, nf.s, nf.l)
        self.ce_color = HslTuple(ce.h, ce.s, ce.l)
        self.grand_comp = DddTuple(grand_comp.h, grand_comp.s, grand_comp.l)
        self.grand_rate = DddTuple(grand_rate.h, grand_rate.s, grand_rate.l)

    def copy_from(self, other: ColorTheme) -> None:
        """Make this theme an independent copy of ``other``."""
        self.name = other.name
        self.set_color(
            other.mx_color,
            other.mi_color,
            other.nf_color,
            other.ce_color,
            other.grand_comp,
            other.grand_rate,
        )

    @property
    def color_nf(self) -> HslColor:
        """Colour for a task whose source file was not found."""
        return self.nf_color.to_color()

    @property
    def color_ce(self) -> HslColor:
        """Colour for a task whose source failed to compile."""
        return self.ce_color.to_color()

    def invert_lightness(self) -> None:
        """Flip the lightness of every colour, as for a dark background."""
        for color in (self.mx_color, self.mi_color, self.nf_color, self.ce_color):
            color.l = 100 - color.l

    def color_per(self, value: float, total: float | None = None) -> HslColor:
        """Colour for a score ratio, given as ``value`` or as ``value / total``."""
        p = _ratio(value, total)
        return (
            make_per(p, self.mi_color.h, self.mx_color.h, 360.0),
            make_per(p, self.mi_color.s, self.mx_color.s, 100.0),
            make_per(p, self.mi_color.l, self.mx_color.l, 100.0),
        )

    def color_grand(self, value: float, total: float | None = None) -> HslColor:
        """Colour for a total score ratio, adjusted by the grand rate and offset."""
        p = _ratio(value, total)
        return (
            make_per(p, self.mi_color.h, self.mx_color.h, 360.0, self.grand_rate.h, self.grand_comp.h),
            make_per(p, self.mi_color.s, self.mx_color.s, 100.0, self.grand_rate.s, self.grand_comp.s),
            make_per(p, self.mi_color.l, self.mx_color.l, 100.0, self.grand_rate.l, self.grand_comp.l),
        )