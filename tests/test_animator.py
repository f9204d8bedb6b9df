import math
import random

import pytest

from dnahelix.animator import (
    AREA_MAX_Y,
    AREA_MIN_Y,
    CURVE_SCALE,
    DNA,
    Y_START,
    Animation,
    Animator,
    Randomizer,
    Statistics,
    StatusBit,
    Timestamps,
    map_range,
)
from dnahelix.circle import RED, WHITE


class FakeClock:
    def __init__(self, start=0.0):
        self.t = start

    def __call__(self):
        return self.t

    def advance(self, seconds):
        self.t += seconds


@pytest.fixture
def clocks():
    return FakeClock(), FakeClock(1000.0)


@pytest.fixture
def animator(clocks):
    clock, wall = clocks
    ani = Animator(clock=clock, wall_clock=wall, rng=random.Random(7))
    ani.initialize_start()
    ani.initialize_time_points()
    return ani


def start(ani):
    ani.status_bits.add(StatusBit.IS_RUNNING)
    ani.start_by_create_new_ball(ani.dna.spiral_one)
    ani.start_by_create_new_ball(ani.dna.spiral_second)
    ani.start_by_create_new_ball(ani.rect_builder)
    ani.w_animation |= {
        Animation.SHOW_COSINUS,
        Animation.SHOW_SINUS,
        Animation.SHOW_BINDUNGEN,
        Animation.DNA,
    }


def test_map_range_endpoints():
    assert map_range(AREA_MIN_Y, AREA_MIN_Y, AREA_MAX_Y, 0.5, 1.2) == pytest.approx(0.5)
    assert map_range(AREA_MAX_Y, AREA_MIN_Y, AREA_MAX_Y, 0.5, 1.2) == pytest.approx(1.2)


def test_map_range_degenerate_input_returns_midpoint():
    assert map_range(7.0, 3.0, 3.0, 100.0, 200.0) == pytest.approx(150.0)


def test_randomizer_stays_in_range():
    rand = Randomizer(random.Random(1))
    values = {rand.random_int(0, 3) for _ in range(200)}
    assert values <= {0, 1, 2, 3}
    assert len(values) > 1


def test_randomizer_empty_range_raises():
    with pytest.raises(ValueError):
        Randomizer().random_int(3, 0)


def test_randomizer_seeded_is_reproducible():
    a = Randomizer(random.Random(42))
    b = Randomizer(random.Random(42))
    assert [a.random_int(0, 3) for _ in range(20)] == [b.random_int(0, 3) for _ in range(20)]


def test_timestamps_milliseconds_truncate():
    assert Timestamps.milliseconds_between(1.32, 1.0) == 320
    assert Timestamps.milliseconds_between(1.0, 1.0) == 0


def test_initialize_start_resets_state(animator):
    start(animator)
    animator.initialize_start()
    assert animator.status_bits == {StatusBit.SHOW_OVERLAY}
    assert animator.w_animation == set()
    assert animator.rect_builder == []
    assert animator.rect_connections == []
    assert animator.dna == DNA()


def test_start_by_create_new_ball(animator):
    animator.start_by_create_new_ball(animator.dna.spiral_one)
    (ball,) = animator.dna.spiral_one
    assert ball.fill_color == RED
    assert (ball.x, ball.y) == (0.0, Y_START)


def test_cooldown_ms(animator):
    assert animator.cooldown_ms() == 320


def test_elapsed_text(animator, clocks):
    _, wall = clocks
    animator.set_system_clock_now()
    assert animator.elapsed_text() == "00:00"
    wall.advance(125)
    assert animator.elapsed_text() == "02:05"


def test_reset_dy(animator):
    animator.dy = 4.0
    animator.reset_dy()
    assert animator.dy == 0.0


def test_fly_plane_respects_cooldown(animator, clocks):
    clock, _ = clocks
    start_x = animator.plane.x
    animator.fly_plane(1100.0)
    assert animator.plane.x == start_x
    clock.advance(0.01)
    animator.fly_plane(1100.0)
    assert animator.plane.x == pytest.approx(start_x + animator.plane.step)


def test_process_dna_flow_grows_and_pairs(animator, clocks):
    clock, _ = clocks
    start(animator)
    clock.advance(0.32)
    animator.process_dna_flow(1100.0, 800.0)

    one, second = animator.dna.spiral_one, animator.dna.spiral_second
    assert len(one) == 2
    assert len(second) == 2
    assert len(animator.rect_connections) == 2
    assert one[1].x == pytest.approx(animator.radius + one[0].x)
    assert second[1].acid == one[1].acid.complement()
    assert second[1].text == one[1].acid.complement().letter()
    assert second[1].fill_color.rgb == one[1].acid.complement().color().rgb


def test_bond_spans_the_pair(animator, clocks):
    clock, _ = clocks
    start(animator)
    clock.advance(0.32)
    animator.process_dna_flow(1100.0, 800.0)
    first, partner = animator.dna.spiral_one[1], animator.dna.spiral_second[1]
    assert first.bond.length == pytest.approx(math.hypot(partner.x - first.x, partner.y - first.y))
    assert first.bond.x == pytest.approx(first.x + animator.radius)


def test_curves_stay_in_area(animator, clocks):
    clock, _ = clocks
    start(animator)
    for _ in range(5):
        clock.advance(0.32)
        animator.process_dna_flow(1100.0, 800.0)
    for circle in animator.dna.spiral_one + animator.dna.spiral_second:
        assert CURVE_SCALE * 50.0 - 1e-6 <= circle.y <= CURVE_SCALE * 250.0 + 1e-6


def test_scale_and_alpha_follow_sine_position(animator, clocks):
    clock, _ = clocks
    start(animator)
    for _ in range(3):
        clock.advance(0.32)
        animator.process_dna_flow(1100.0, 800.0)
    for sin_c, cos_c in zip(animator.dna.spiral_one[1:], animator.dna.spiral_second[1:]):
        assert 0.5 - 1e-6 <= sin_c.scale <= 1.2 + 1e-6
        assert cos_c.scale == sin_c.scale
        assert 100 <= sin_c.fill_color.a <= 255


def test_paused_does_not_grow(animator, clocks):
    clock, _ = clocks
    start(animator)
    animator.status_bits.add(StatusBit.IS_PAUSED)
    clock.advance(1.0)
    animator.process_dna_flow(1100.0, 800.0)
    assert len(animator.dna.spiral_one) == 1
    assert len(animator.dna.spiral_second) == 1


def test_growth_stops_past_window(animator, clocks):
    clock, _ = clocks
    start(animator)
    for _ in range(4):
        clock.advance(0.32)
        animator.process_dna_flow(0.0, 800.0)
    assert len(animator.dna.spiral_one) == 2


def test_rect_builder_is_replaced_by_white_ball(animator, clocks):
    clock, _ = clocks
    start(animator)
    clock.advance(0.32)
    animator.process_dna_flow(1100.0, 800.0)
    (ball,) = animator.rect_builder
    assert ball.fill_color == WHITE
    assert ball.x == pytest.approx(animator.radius)


def test_statistics_count_every_base(animator, clocks):
    clock, _ = clocks
    start(animator)
    animator.status_bits.add(StatusBit.SHOW_STATISTICS)
    for _ in range(5):
        clock.advance(0.32)
        animator.process_dna_flow(1100.0, 800.0)
    clock.advance(1.3)
    animator.process_dna_flow(1100.0, 800.0)
    stats = animator.stats
    total = stats.adenin + stats.thymin + stats.guanin + stats.cytosin
    paired = min(len(animator.dna.spiral_one), len(animator.dna.spiral_second)) - 1
    assert total == (len(animator.dna.spiral_one) - 1) + paired
    assert stats.adenin == stats.thymin
    assert stats.guanin == stats.cytosin


def test_statistics_untouched_when_hidden(animator, clocks):
    clock, _ = clocks
    start(animator)
    for _ in range(5):
        clock.advance(0.32)
        animator.process_dna_flow(1100.0, 800.0)
    assert animator.stats == Statistics()


def test_special_flow_destroys_and_restarts(animator, clocks):
    clock, _ = clocks
    start(animator)
    clock.advance(0.32)
    animator.process_dna_flow(1100.0, 800.0)
    assert len(animator.dna.spiral_one) == 2

    animator.w_animation.add(Animation.RESTART)
    clock.advance(1.0)
    animator.process_special_dna_flow(1100.0, 800.0)
    assert Animation.BEGIN_DESTROY in animator.w_animation
    assert len(animator.dna.spiral_one) == 1
    assert len(animator.dna.spiral_second) == 1

    clock.advance(1.0)
    animator.process_special_dna_flow(1100.0, 800.0)
    assert animator.dna.spiral_one == []
    assert animator.dna.spiral_second == []

    animator.w_animation.discard(Animation.RESTART)
    clock.advance(1.0)
    animator.process_special_dna_flow(1100.0, 800.0)
    assert Animation.BEGIN_DESTROY not in animator.w_animation
    assert Animation.RESTART not in animator.w_animation
    assert len(animator.dna.spiral_one) == 1
    assert animator.dna.spiral_one[0].fill_color == RED