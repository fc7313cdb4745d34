import pytest

from bugsim.bug import Bug, Vec2
from bugsim.smellmap import SmellMap


def _bug(x, y):
    return Bug(Vec2(x, y), [0] * 6, 1)


def test_new_grid_is_zero():
    smell = SmellMap(4, 3)
    assert len(smell.grid) == 4
    assert all(len(column) == 3 for column in smell.grid)
    assert all(v == 0.0 for column in smell.grid for v in column)


def test_diffusion_keeps_three_eighths():
    smell = SmellMap(5, 5)
    smell.grid[2][2] = 1.0
    smell.apply_diffusion()
    assert smell.grid[2][2] == pytest.approx(3.0 / 8.0)


def test_diffusion_spreads_to_lower_neighbours_only():
    smell = SmellMap(5, 5)
    smell.grid[2][2] = 1.0
    smell.apply_diffusion()
    assert smell.grid[1][2] == pytest.approx(1.0 / 8.0)
    assert smell.grid[2][1] == pytest.approx(1.0 / 8.0)
    assert smell.grid[3][2] == 0.0
    assert smell.grid[2][3] == 0.0


def test_diffusion_never_increases_total():
    smell = SmellMap(6, 6)
    for x in range(6):
        for y in range(6):
            smell.grid[x][y] = (x * 7 + y * 3) % 5 / 4
    before = sum(map(sum, smell.grid))
    smell.apply_diffusion()
    after = sum(map(sum, smell.grid))
    assert after <= before
    assert all(v >= 0 for column in smell.grid for v in column)


def test_simulate_marks_living_bug():
    smell = SmellMap(10, 10)
    smell.simulate([_bug(4.7, 6.2)])
    assert smell.grid[4][6] == 1.0


def test_simulate_skips_dead_and_out_of_bounds():
    smell = SmellMap(10, 10)
    dead = _bug(2, 2)
    dead.die()
    outside = _bug(12, 3)
    smell.simulate([dead, outside])
    assert all(v == 0.0 for column in smell.grid for v in column)


def test_simulate_does_not_kill_bugs():
    smell = SmellMap(10, 10)
    old = _bug(1, 1)
    old.age = old.max_age + 1
    smell.simulate([old])
    assert old.is_dead is False
    assert smell.grid[1][1] == 0.0


def test_faint_scent_is_cleared():
    smell = SmellMap(3, 3)
    smell.grid[0][0] = 0.00001
    smell.simulate([])
    assert smell.grid[0][0] == 0.0


def test_visible_cells_colour_at_full_intensity():
    smell = SmellMap(4, 4)
    smell.grid[1][2] = 1.0
    assert smell.visible_cells() == [(1, 2, (255, 0, 239))]


def test_visible_cells_follow_simulation():
    smell = SmellMap(8, 8)
    smell.simulate([_bug(3, 3)])
    positions = {(x, y) for x, y, _ in smell.visible_cells()}
    assert (3, 3) in positions
    for x, y, color in smell.visible_cells():
        assert color[1] == 0
        assert 120 <= color[0] <= 255
        assert 110 <= color[2] <= 239