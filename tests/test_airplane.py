import math

from dnahelix.airplane import LEFT_LIMIT, RIGHT_LIMIT, Airplane
from dnahelix.circle import MAGENTA, RED


def test_starts_at_given_position():
    plane = Airplane(60.0, 70.0, 20.0, 10.0)
    assert (plane.x, plane.y) == (60.0, 70.0)


def test_colors():
    plane = Airplane()
    assert plane.body_color == MAGENTA
    assert plane.wing_color == RED


def test_body_rectangle():
    plane = Airplane(60.0, 60.0, 20.0, 10.0)
    assert plane.body == (60.0, 60.0, 20.0, 10.0)


def test_wings_geometry():
    plane = Airplane(60.0, 60.0, 20.0, 10.0)
    upper, lower = plane.wings()
    assert upper[1] == (60.0, 60.0)
    assert upper[2] == (80.0, 60.0)
    assert upper[0][0] == lower[0][0]
    assert upper[0][1] < plane.pos_y
    assert lower[0][1] > plane.pos_y + plane.size_y
    assert lower[1] == (60.0, 70.0)


def test_move_right_first():
    plane = Airplane()
    plane.move_x()
    assert math.isclose(plane.x, 60.1)
    assert plane.step == 0.1
    assert plane.y == plane.pos_y


def test_turns_at_right_limit():
    plane = Airplane()
    plane.x = RIGHT_LIMIT - 0.05
    plane.move_x()
    assert plane.step == -0.1
    before = plane.x
    plane.move_x()
    assert plane.x < before


def test_turns_at_left_limit():
    plane = Airplane()
    plane.x = LEFT_LIMIT + 0.05
    plane.step = -0.1
    plane.move_x()
    assert plane.step == 0.1


def test_stays_within_limits_over_many_moves():
    plane = Airplane()
    reached_right = False
    for _ in range(10000):
        plane.move_x()
        assert LEFT_LIMIT - 0.2 <= plane.x <= RIGHT_LIMIT + 0.2
        if plane.step < 0:
            reached_right = True
    assert reached_right