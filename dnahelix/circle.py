"""Nucleotide circles that travel along the sine and cosine strands of the helix."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def with_alpha(self, alpha: float) -> Color:
        """Return the same colour with the alpha channel replaced, clamped to 0..255."""
        return Color(self.r, self.g, self.b, max(0, min(255, int(alpha))))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
MAGENTA = Color(255, 0, 255)
CYAN = Color(0, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)


class Aminoacid(Enum):
    """The four bases carried by the helix."""

    ADENIN = 0
    THYMIN = 1
    GUANIN = 2
    CYTOSIN = 3

    def letter(self) -> str:
        """Single-letter label of the base."""
        return _LETTERS[self]

    def color(self) -> Color:
        """Display colour of the base."""
        return _COLORS[self]

    def complement(self) -> Aminoacid:
        """The base that pairs with this one."""
        return _COMPLEMENTS[self]


_LETTERS = {
    Aminoacid.ADENIN: "A",
    Aminoacid.THYMIN: "T",
    Aminoacid.GUANIN: "G",
    Aminoacid.CYTOSIN: "C",
}

_COLORS = {
    Aminoacid.ADENIN: BLUE,
    Aminoacid.THYMIN: RED,
    Aminoacid.GUANIN: GREEN,
    Aminoacid.CYTOSIN: YELLOW,
}

_COMPLEMENTS = {
    Aminoacid.ADENIN: Aminoacid.THYMIN,
    Aminoacid.THYMIN: Aminoacid.ADENIN,
    Aminoacid.GUANIN: Aminoacid.CYTOSIN,
    Aminoacid.CYTOSIN: Aminoacid.GUANIN,
}


@dataclass
class Bond:
    """A rotated bar connecting a circle to its partner on the other strand."""

    length: float = 0.0
    thickness: float = 0.0
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    color: Color = WHITE


@dataclass
class Circle:
    """A ball on one of the strands, optionally labelled with a base."""

    radius: float = 5.0
    x: float = 10.0
    y: float = 10.0
    fill_color: Color = WHITE
    outline_thickness: float = 1.5
    outline_color: Color = BLACK
    scale: float = 1.0
    acid: Aminoacid | None = None
    text: str = ""
    text_x: float = 0.0
    text_y: float = 0.0
    text_color: Color = BLACK
    text_outline_color: Color = YELLOW
    text_outline_thickness: float = 1.0
    character_size: int = 20
    bond: Bond = field(default_factory=Bond)
    dy: float = 0.0
    step: float = 0.1
    phase_offset: float = 0.0
    amplitude: float = 100.0
    frequency: float = 1.0
    offset: float = 150.0

    def change_y_sinus(self, time: float, curve_scale: float) -> None:
        """Place the circle on the sine curve at the given time."""
        self.y = curve_scale * (
            self.amplitude * math.sin(self.frequency * time + self.phase_offset) + self.offset
        )

    def change_y_cosinus(self, time: float, curve_scale: float) -> None:
        """Place the circle on the cosine curve at the given time."""
        self.y = curve_scale * (
            self.amplitude * math.cos(self.frequency * time + self.phase_offset) + self.offset
        )

    def bounce_y(self, area_max_y: float, area_min_y: float) -> None:
        """Move one step vertically, reversing direction at the area borders."""
        new_y = self.y + self.step
        if new_y >= area_max_y:
            self.step = -0.1
        elif new_y <= area_min_y:
            self.step = 0.1
        self.dy = self.y + self.step
        self.y = new_y

    def set_acid_type(self, acid: Aminoacid) -> None:
        """Assign a base to the circle and label it with the base's letter."""
        self.acid = acid
        self.text = acid.letter()

    def _require_acid(self) -> Aminoacid:
        if self.acid is None:
            raise ValueError("circle has no acid type assigned")
        return self.acid

    def color_for_acid(self) -> Color:
        """Opaque display colour of the assigned base."""
        return self._require_acid().color().with_alpha(255)

    def opposite_color(self) -> Color:
        """Opaque display colour of the complementary base."""
        return self._require_acid().complement().color().with_alpha(255)

    def opposite_acid(self) -> Aminoacid:
        """The base complementary to the assigned one."""
        return self._require_acid().complement()

    def opposite_text(self) -> str:
        """Letter of the complementary base."""
        return self._require_acid().complement().letter()