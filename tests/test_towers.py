import pytest

from hanoitower.towers import InvalidMove, Towers, minimum_moves


def _solve(towers, count, source, target, spare):
    if count == 0:
        return 0
    moves = _solve(towers, count - 1, source, spare, target)
    towers.move(source, target)
    moves += 1
    return moves + _solve(towers, count - 1, spare, target, source)


def test_initial_state():
    towers = Towers(4)
    assert towers.height("A") == 4
    assert towers.height("B") == 0
    assert towers.height("C") == 0
    assert [towers.disk_at("A", level) for level in range(4)] == [4, 3, 2, 1]
    assert not towers.solved()


def test_disk_at_empty_level_is_zero():
    towers = Towers(3)
    assert towers.disk_at("A", 3) == 0
    assert towers.disk_at("B", 0) == 0


def test_move_transfers_top_disk():
    towers = Towers(3)
    towers.move("a", "c")
    assert towers.height("A") == 2
    assert towers.disk_at("C", 0) == 1


def test_same_tower_rejected():
    towers = Towers(3)
    with pytest.raises(InvalidMove, match="diferentes"):
        towers.move("A", "A")


def test_empty_source_rejected():
    towers = Towers(3)
    with pytest.raises(InvalidMove, match="'B' esta vazia"):
        towers.move("B", "C")


def test_larger_on_smaller_rejected():
    towers = Towers(3)
    towers.move("A", "C")
    with pytest.raises(InvalidMove, match="disco maior"):
        towers.move("A", "C")
    assert towers.height("A") == 2


@pytest.mark.parametrize("source, target", [("X", "A"), ("A", "Z"), ("", "B")])
def test_unknown_tower_rejected(source, target):
    towers = Towers(3)
    with pytest.raises(InvalidMove, match="Torre nao existe"):
        towers.move(source, target)


@pytest.mark.parametrize("disks", range(1, 9))
def test_optimal_solution_matches_minimum(disks):
    towers = Towers(disks)
    moves = _solve(towers, disks, "A", "C", "B")
    assert towers.solved()
    assert towers.height("C") == disks
    assert moves == minimum_moves(disks)


def test_minimum_moves_three_disks():
    assert minimum_moves(3) == 7


def test_render_single_disk():
    assert Towers(1).render() == "\n#   |   |\n=   =   =\nA   B   C\n\n"


@pytest.mark.parametrize("disks", [2, 3, 5, 8])
def test_render_shape(disks):
    towers = Towers(disks)
    towers.move("A", "B")
    text = towers.render()
    assert text.startswith("\n") and text.endswith("\n\n")
    lines = text.strip("\n").split("\n")
    assert len(lines) == disks + 2
    width = 3 * (2 * disks - 1) + 6
    assert all(len(line) == width for line in lines)
    assert lines[-2] == "   ".join(["=" * (2 * disks - 1)] * 3)
    assert lines[-1].split() == ["A", "B", "C"]
    assert lines[-3].count("#") == 2 * disks - 1 + 1