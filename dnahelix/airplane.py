"""A small plane sprite that flies back and forth above the helix."""

from __future__ import annotations

from dataclasses import dataclass, field

from dnahelix.circle import MAGENTA, RED, Color

TEXTURE_SIZE = (140, 100)
LEFT_LIMIT = 60.0
RIGHT_LIMIT = 500.0
SPEED = 0.1

Point = tuple[float, float]


@dataclass
class Airplane:
    """A plane made of a body rectangle and two triangular wings."""

    pos_x: float = 60.0
    pos_y: float = 60.0
    size_x: float = 20.0
    size_y: float = 10.0
    body_color: Color = MAGENTA
    wing_color: Color = RED
    x: float = field(init=False)
    y: float = field(init=False)
    dx: float = field(init=False, default=0.0)
    step: float = field(init=False, default=SPEED)

    def __post_init__(self) -> None:
        self.x = self.pos_x
        self.y = self.pos_y

    @property
    def body(self) -> tuple[float, float, float, float]:
        """Body rectangle as (left, top, width, height) in texture coordinates."""
        return (self.pos_x, self.pos_y, self.size_x, self.size_y)

    def wings(self) -> tuple[tuple[Point, Point, Point], tuple[Point, Point, Point]]:
        """The upper and lower wing triangles in texture coordinates."""
        px, py, sx, sy = self.pos_x, self.pos_y, self.size_x, self.size_y
        upper = ((px + sx / 2.0, py - 2.0 * sy), (px, py), (px + sx, py))
        lower = ((px + sx / 2.0, py + 3.0 * sy), (px, py + sy), (px + sx, py + sy))
        return upper, lower

    def move_x(self) -> None:
        """Advance one step horizontally, turning around at the flight limits."""
        new_x = self.x + self.step
        if new_x >= RIGHT_LIMIT:
            self.step = -SPEED
        elif new_x <= LEFT_LIMIT:
            self.step = SPEED
        self.dx = self.x + self.step
        self.x = new_x