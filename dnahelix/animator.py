"""Time-driven animation of the two helix strands, their bonds and statistics."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable

from dnahelix.airplane import Airplane
from dnahelix.circle import CYAN, RED, WHITE, Aminoacid, Bond, Circle

Y_START = 60.0
ADJ_SIZE = 1.0
CURVE_SCALE = 1.2

AREA_MIN_Y = 50.0
AREA_MAX_Y = 250.0 * CURVE_SCALE

BOND_THICKNESS = 2.0
FRAME_SIZE = (5.0, 0.5)


class StatusBit(IntEnum):
    """General state flags of the animation."""

    SHOW_ACID_TYPE = 0
    SHOW_OVERLAY = 1
    SHOW_STATISTICS = 2
    SHOW_WHITE_SCREEN = 3
    IS_PAUSED = 4
    IS_RUNNING = 5
    STANDARD_ANIMATION = 6
    SPECIAL_ANIMATION = 7


class Animation(IntEnum):
    """Flags selecting what is animated and shown."""

    DNA = 0
    FLY_PLANE = 1
    SHOW_SINUS = 2
    SHOW_COSINUS = 3
    SHOW_BINDUNGEN = 4
    SIN2T1_COS_T2_PLUS_2T1 = 5
    COS_2T2 = 6
    RESTART = 7
    BEGIN_DESTROY = 8


@dataclass
class Statistics:
    """How many bases of each kind are currently on the strands."""

    adenin: int = 0
    thymin: int = 0
    guanin: int = 0
    cytosin: int = 0


_STAT_FIELDS = {
    Aminoacid.ADENIN: "adenin",
    Aminoacid.THYMIN: "thymin",
    Aminoacid.GUANIN: "guanin",
    Aminoacid.CYTOSIN: "cytosin",
}


class Randomizer:
    """Source of uniformly distributed integers."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def random_int(self, bottom: int, top: int) -> int:
        """Return an integer in the closed range [bottom, top]."""
        if bottom > top:
            raise ValueError(f"empty range: {bottom} > {top}")
        return self._rng.randint(bottom, top)


@dataclass
class DNA:
    """The two strands of the helix."""

    spiral_one: list[Circle] = field(default_factory=list)
    spiral_second: list[Circle] = field(default_factory=list)


@dataclass
class Timestamps:
    """Time points and cooldowns that pace the animation (cooldowns in ms)."""

    clock: Callable[[], float] = time.monotonic
    wall_clock: Callable[[], float] = time.time
    count: float = 0.0
    cooldown_plane: int = 10
    cooldown_stats: int = 1200
    cooldown_restart_destroy: int = 640
    cooldown: int = 320
    now: float = 0.0
    last_time_plane_move_x: float = 0.0
    last_time_stats: float = 0.0
    last_time_rect_builder: float = 0.0
    last_time_restarted_destroy: float = 0.0
    last_time: float = 0.0
    last_time_second: float = 0.0
    clock_1_start: float = 0.0
    clock_2_start: float = 0.0

    def current_time(self) -> float:
        return self.clock()

    @staticmethod
    def milliseconds_between(t1: float, t0: float) -> int:
        """Whole milliseconds from t0 to t1, truncated toward zero."""
        micros = round((t1 - t0) * 1_000_000)
        return int(micros / 1000)

    def elapsed_1(self) -> float:
        return self.clock() - self.clock_1_start

    def elapsed_2(self) -> float:
        return self.clock() - self.clock_2_start


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map value from [in_min, in_max] onto [out_min, out_max]."""
    if abs(in_max - in_min) < 1e-6:
        return (out_min + out_max) / 2.0
    normalized = (value - in_min) / (in_max - in_min)
    return normalized * (out_max - out_min) + out_min


class Animator:
    """Grows, moves and decorates the helix strands over time."""

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
    ) -> None:
        self.status_bits: set[StatusBit] = set()
        self.w_animation: set[Animation] = set()
        self.stats = Statistics()
        self.plane = Airplane(60.0, 60.0, 20.0, 10.0)
        self.dna = DNA()
        self.rect_builder: list[Circle] = []
        self.rect_connections: list[Bond] = []
        self.rand = Randomizer(rng)
        self.radius = 5.0
        self.dy = 0.0

        now = clock()
        self.timestamps = Timestamps(
            clock=clock,
            wall_clock=wall_clock,
            count=wall_clock(),
            now=now,
            last_time_plane_move_x=now,
            last_time_stats=now,
            last_time_rect_builder=now,
            last_time_restarted_destroy=now,
            last_time=now,
            last_time_second=now,
            clock_1_start=now,
            clock_2_start=now,
        )

    # ------------------------------------------------------------------ state

    def initialize_start(self) -> None:
        """Clear all state and enable the overlay."""
        self.status_bits.clear()
        self.w_animation.clear()
        self.dy = 0.0
        self.rect_builder.clear()
        self.rect_connections.clear()
        self.dna = DNA()
        self.status_bits.add(StatusBit.SHOW_OVERLAY)

    def initialize_time_points(self) -> None:
        ts = self.timestamps
        ts.now = ts.current_time()
        ts.last_time_stats = ts.now

    def set_system_clock_now(self) -> None:
        """Restart the running-time counter."""
        self.timestamps.count = self.timestamps.wall_clock()

    def elapsed_text(self) -> str:
        """Time since the counter was started, as MM:SS."""
        elapsed = int(self.timestamps.wall_clock() - self.timestamps.count)
        minutes, seconds = divmod(elapsed, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def cooldown_ms(self) -> int:
        return self.timestamps.cooldown

    def reset_dy(self) -> None:
        self.dy = 0.0

    # ------------------------------------------------------------ processing

    def start_by_create_new_ball(self, spiral: list[Circle]) -> None:
        """Seed a strand with its first, red circle."""
        spiral.append(Circle(radius=self.radius, x=0.0, y=Y_START, fill_color=RED))
        ts = self.timestamps
        ts.now = ts.current_time()
        ts.last_time = ts.now

    def process_special_dna_flow(self, win_size_x: float, win_size_y: float) -> None:
        """Run one frame of the self-restarting variant of the animation."""
        if Animation.RESTART in self.w_animation:
            self.w_animation.add(Animation.BEGIN_DESTROY)
        self.process_dna_flow(win_size_x, win_size_y)

    def process_dna_flow(self, win_size_x: float, win_size_y: float) -> None:
        """Run one frame of the helix animation."""
        ts = self.timestamps
        time_1 = ts.elapsed_1()
        if Animation.SIN2T1_COS_T2_PLUS_2T1 in self.w_animation:
            time_1 *= 2
        self._process_sinus(time_1, self.dna.spiral_one, win_size_x)

        time_2 = ts.elapsed_2()
        if Animation.SIN2T1_COS_T2_PLUS_2T1 in self.w_animation:
            time_2 += time_1
        if Animation.COS_2T2 in self.w_animation:
            time_2 *= 2
        self._process_cosinus(time_2, self.dna.spiral_second, win_size_x)

        self._connect_curves()
        self._process_rect_builder(self.rect_builder, win_size_x)
        self._adjust_scale_color_alpha()

        if (
            StatusBit.SHOW_STATISTICS in self.status_bits
            and ts.milliseconds_between(ts.now, ts.last_time_stats) >= ts.cooldown_stats
        ):
            self.stats = Statistics()
            self._collect_statistics(self.dna.spiral_one)
            self._collect_statistics(self.dna.spiral_second)
            ts.last_time_stats = ts.now

    def fly_plane(self, win_size_x: float) -> None:
        """Move the plane one step if its cooldown has passed."""
        ts = self.timestamps
        ts.now = ts.current_time()
        if ts.milliseconds_between(ts.now, ts.last_time_plane_move_x) >= ts.cooldown_plane:
            self.plane.move_x()
            ts.last_time_plane_move_x = ts.now

    # --------------------------------------------------------------- helpers

    @property
    def _paused(self) -> bool:
        return StatusBit.IS_PAUSED in self.status_bits

    def _process_sinus(self, t: float, spiral: list[Circle], win_size_x: float) -> None:
        ts = self.timestamps
        ts.now = ts.current_time()
        destroying = Animation.BEGIN_DESTROY in self.w_animation

        if ts.milliseconds_between(ts.now, ts.last_time) >= ts.cooldown:
            if spiral and not self._paused:
                if destroying:
                    if (
                        ts.milliseconds_between(ts.now, ts.last_time_restarted_destroy)
                        >= ts.cooldown_restart_destroy
                    ):
                        spiral.pop()
                elif spiral[-1].x <= win_size_x:
                    self._create_sinus_ball(spiral)
                    self._create_rectangle(spiral)
                    ts.last_time = ts.now
            elif destroying:
                self.w_animation.discard(Animation.BEGIN_DESTROY)
                self.w_animation.discard(Animation.RESTART)
                self.set_system_clock_now()
                self.start_by_create_new_ball(self.dna.spiral_one)
                self.start_by_create_new_ball(self.dna.spiral_second)

        for circle in spiral:
            circle.change_y_sinus(t, CURVE_SCALE)

    def _process_cosinus(self, t: float, spiral: list[Circle], win_size_x: float) -> None:
        ts = self.timestamps
        ts.now = ts.current_time()

        if ts.milliseconds_between(ts.now, ts.last_time_second) >= ts.cooldown:
            if spiral and not self._paused:
                if Animation.BEGIN_DESTROY in self.w_animation:
                    if (
                        ts.milliseconds_between(ts.now, ts.last_time_restarted_destroy)
                        >= ts.cooldown_restart_destroy
                    ):
                        spiral.pop()
                        ts.last_time_restarted_destroy = ts.now
                elif spiral[-1].x <= win_size_x:
                    self._create_cosinus_ball(spiral)
                    ts.last_time_second = ts.now

        for circle in spiral:
            circle.change_y_cosinus(t, CURVE_SCALE)

    def _process_rect_builder(self, spiral: list[Circle], win_size_x: float) -> None:
        ts = self.timestamps
        if ts.milliseconds_between(ts.current_time(), ts.last_time_rect_builder) >= ts.cooldown:
            if spiral and not self._paused:
                if spiral[-1].x <= win_size_x:
                    new_ball = Circle(
                        radius=self.radius,
                        x=self.radius + spiral[-1].x,
                        y=AREA_MAX_Y + 20.0,
                        fill_color=WHITE,
                    )
                    spiral[0] = new_ball
                else:
                    spiral.pop()
                ts.last_time_rect_builder = ts.current_time()

        for circle in spiral:
            circle.bounce_y(AREA_MAX_Y, AREA_MIN_Y)

    def _create_rectangle(self, spiral: list[Circle]) -> None:
        x = spiral[-1].x
        width, height = FRAME_SIZE
        for y in (AREA_MIN_Y, AREA_MAX_Y + 20.0):
            self.rect_connections.append(
                Bond(length=width, thickness=height, x=x, y=y, color=WHITE)
            )

    def _create_sinus_ball(self, spiral: list[Circle]) -> None:
        last = spiral[-1]
        ball = Circle(radius=self.radius)
        acid = Aminoacid(
            self.rand.random_int(Aminoacid.ADENIN.value, Aminoacid.CYTOSIN.value)
        )
        ball.set_acid_type(acid)
        ball.fill_color = ball.color_for_acid()
        ball.x = ADJ_SIZE * self.radius + last.x
        ball.y = Y_START
        ball.phase_offset = last.x * 0.05
        spiral.append(ball)

    def _create_cosinus_ball(self, spiral: list[Circle]) -> None:
        last = spiral[-1]
        ball = Circle(
            radius=self.radius,
            x=ADJ_SIZE * self.radius + last.x,
            y=AREA_MAX_Y - 10.0,
            fill_color=WHITE,
        )
        ball.phase_offset = last.x * 0.05
        spiral.append(ball)

    def _connect_curves(self) -> None:
        r = self.radius
        for first, second in zip(self.dna.spiral_one[1:], self.dna.spiral_second[1:]):
            start_x, start_y = first.x + r, first.y + r
            end_x, end_y = second.x + r, second.y + r
            dx, dy = end_x - start_x, end_y - start_y
            alpha = map_range(start_y, AREA_MIN_Y, AREA_MAX_Y, 125.0, 225.0)
            first.bond = Bond(
                length=math.hypot(dx, dy),
                thickness=BOND_THICKNESS,
                x=start_x,
                y=start_y,
                rotation=math.degrees(math.atan2(dy, dx)),
                color=CYAN.with_alpha(alpha),
            )
            second.fill_color = first.opposite_color()
            second.set_acid_type(first.opposite_acid())
            second.text = first.opposite_text()

    @staticmethod
    def _adjust_scale(circle: Circle, y: float) -> None:
        circle.scale = map_range(y, AREA_MIN_Y, AREA_MAX_Y, 0.5, 1.2)

    @staticmethod
    def _adjust_color_alpha(circle: Circle, y: float) -> None:
        alpha = map_range(y, AREA_MIN_Y, AREA_MAX_Y, 100.0, 255.0)
        circle.fill_color = circle.fill_color.with_alpha(alpha)

    @staticmethod
    def _adjust_text_alpha(circle: Circle, y: float) -> None:
        alpha = map_range(y, AREA_MIN_Y, AREA_MAX_Y, 100.0, 255.0)
        circle.text_color = circle.text_color.with_alpha(alpha)

    def _adjust_scale_color_alpha(self) -> None:
        one, second = self.dna.spiral_one, self.dna.spiral_second
        for circle in (*second, *one):
            circle.text_x = circle.x
            circle.text_y = circle.y - 3.0

        # Strand visibility is read from the status bits at the animation flags' positions.
        show_sin = StatusBit(Animation.SHOW_SINUS.value) in self.status_bits
        show_cos = StatusBit(Animation.SHOW_COSINUS.value) in self.status_bits

        if show_sin and not show_cos:
            for circle in one[1:]:
                self._adjust_scale(circle, circle.y)
                self._adjust_color_alpha(circle, circle.y)
        elif show_cos and not show_sin:
            for circle in second[1:]:
                self._adjust_scale(circle, circle.y)
                self._adjust_color_alpha(circle, circle.y)
        else:
            for sin_circle, cos_circle in zip(one[1:], second[1:]):
                y = sin_circle.y
                self._adjust_scale(sin_circle, y)
                self._adjust_color_alpha(sin_circle, y)
                self._adjust_scale(cos_circle, y)
                self._adjust_color_alpha(cos_circle, y)

        if StatusBit.SHOW_ACID_TYPE in self.status_bits:
            for i, sin_circle in enumerate(one[1:], start=1):
                if i < len(second) and show_cos:
                    self._adjust_text_alpha(second[i], second[i].y)
                if show_sin:
                    self._adjust_text_alpha(sin_circle, sin_circle.y)

    def _collect_statistics(self, spiral: list[Circle]) -> None:
        for circle in spiral[1:]:
            if circle.acid is None:
                continue
            name = _STAT_FIELDS[circle.acid]
            setattr(self.stats, name, getattr(self.stats, name) + 1)