import random

import pytest

from puzzle_engine.board import BoardState
from puzzle_engine.core import CellPos, MovementRules, ObstaclePassRule
from puzzle_engine.mechanics import compute_moves, destinations


def rules(max_steps, orthogonal=True, diagonal=False, pass_rule=ObstaclePassRule.CANNOT_PASS_THROUGH):
    return MovementRules(max_steps, orthogonal, diagonal, pass_rule)


def cells(*pairs):
    return [CellPos(x, y) for x, y in pairs]


def test_default_rules():
    default = MovementRules()
    assert default.max_steps == 1
    assert default.allow_orthogonal is True
    assert default.allow_diagonal is False
    assert default.pass_rule == ObstaclePassRule.CANNOT_PASS_THROUGH


def test_rules_round_trip_through_dict():
    original = rules(3, True, True, ObstaclePassRule.PUSH_OBSTACLES)
    assert MovementRules.from_dict(original.to_dict()) == original


def test_open_board_orthogonal_clipped_by_bounds(board, make_tile):
    board.try_place_tile(CellPos(0, 0), make_tile("A"))

    options = compute_moves(board, CellPos(0, 0), rules(10))

    assert destinations(options) == cells((1, 0), (2, 0), (0, 1), (0, 2))


def test_cannot_pass_through_blocks_direction(board, make_tile):
    board.try_place_tile(CellPos(0, 0), make_tile("A"))
    board.try_place_tile(CellPos(1, 0), make_tile("B"))

    result = destinations(compute_moves(board, CellPos(0, 0), rules(3)))

    assert CellPos(1, 0) not in result
    assert CellPos(2, 0) not in result
    assert result == cells((0, 1), (0, 2))


def test_push_obstacles_targets_the_occupied_cell(board, make_tile):
    board.try_place_tile(CellPos(0, 0), make_tile("A"))
    board.try_place_tile(CellPos(1, 0), make_tile("B"))

    result = destinations(compute_moves(board, CellPos(0, 0), rules(3, pass_rule=ObstaclePassRule.PUSH_OBSTACLES)))

    assert result == cells((1, 0), (0, 1), (0, 2))
    assert CellPos(2, 0) not in result


def test_push_obstacles_records_empty_cells_before_the_obstacle(make_tile):
    board = BoardState(5, 1)
    board.try_place_tile(CellPos(0, 0), make_tile("A"))
    board.try_place_tile(CellPos(2, 0), make_tile("B"))

    result = destinations(compute_moves(board, CellPos(0, 0), rules(4, pass_rule=ObstaclePassRule.PUSH_OBSTACLES)))

    assert result == cells((1, 0), (2, 0))


def test_can_pass_through_skips_but_never_lands_on_obstacles(board, make_tile):
    board.try_place_tile(CellPos(0, 0), make_tile("A"))
    board.try_place_tile(CellPos(1, 0), make_tile("B"))

    result = destinations(compute_moves(board, CellPos(0, 0), rules(3, pass_rule=ObstaclePassRule.CAN_PASS_THROUGH)))

    assert result == cells((2, 0), (0, 1), (0, 2))


def test_must_pass_through_only_lands_after_an_obstacle(board, make_tile):
    board.try_place_tile(CellPos(0, 0), make_tile("A"))
    board.try_place_tile(CellPos(1, 0), make_tile("B"))

    result = destinations(compute_moves(board, CellPos(0, 0), rules(3, pass_rule=ObstaclePassRule.MUST_PASS_THROUGH)))

    assert result == cells((2, 0))


def test_must_pass_through_on_empty_board_has_no_moves(board, make_tile):
    board.try_place_tile(CellPos(1, 1), make_tile("A"))

    assert compute_moves(board, CellPos(1, 1), rules(5, True, True, ObstaclePassRule.MUST_PASS_THROUGH)) == []


def test_diagonal_only(board, make_tile):
    board.try_place_tile(CellPos(1, 1), make_tile("A"))

    result = destinations(compute_moves(board, CellPos(1, 1), rules(1, orthogonal=False, diagonal=True)))

    assert result == cells((2, 2), (2, 0), (0, 2), (0, 0))


def test_orthogonal_options_come_before_diagonal(board, make_tile):
    board.try_place_tile(CellPos(1, 1), make_tile("A"))

    result = destinations(compute_moves(board, CellPos(1, 1), rules(1, orthogonal=True, diagonal=True)))

    assert result == cells((2, 1), (0, 1), (1, 2), (1, 0), (2, 2), (2, 0), (0, 2), (0, 0))


@pytest.mark.parametrize("movement", [
    rules(0, True, True),
    rules(5, False, False),
    rules(-2, True, True),
])
def test_no_moves_without_steps_or_directions(board, make_tile, movement):
    board.try_place_tile(CellPos(1, 1), make_tile("A"))
    assert compute_moves(board, CellPos(1, 1), movement) == []


def test_compute_moves_does_not_mutate_board(board, make_tile):
    board.try_place_tile(CellPos(0, 0), make_tile("A"))
    board.try_place_tile(CellPos(1, 0), make_tile("B"))
    before = board.to_dict()

    compute_moves(board, CellPos(0, 0), rules(3, True, True, ObstaclePassRule.PUSH_OBSTACLES))

    assert board.to_dict() == before


def _random_board(rng, make_tile):
    board = BoardState(rng.randint(1, 6), rng.randint(1, 6))
    for _ in range(rng.randint(0, board.width * board.height)):
        board.try_place_tile(CellPos(rng.randrange(board.width), rng.randrange(board.height)), make_tile("T"))
    origin = CellPos(rng.randrange(board.width), rng.randrange(board.height))
    return board, origin


def _between(origin, destination):
    """Cells strictly between origin and destination along their ray."""
    dx = (destination.x > origin.x) - (destination.x < origin.x)
    dy = (destination.y > origin.y) - (destination.y < origin.y)
    cell = origin.offset(dx, dy)
    while cell != destination:
        yield cell
        cell = cell.offset(dx, dy)


@pytest.mark.parametrize("seed", range(25))
def test_movement_laws_hold_on_random_boards(seed, make_tile):
    rng = random.Random(seed)
    board, origin = _random_board(rng, make_tile)

    for pass_rule in ObstaclePassRule:
        movement = rules(rng.randint(0, 6), True, True, pass_rule)
        result = destinations(compute_moves(board, origin, movement))

        assert origin not in result
        assert all(board.is_inside_bounds(pos) for pos in result)
        assert len(result) == len(set(result))

        for pos in result:
            blockers = [cell for cell in _between(origin, pos) if board.tile_at(cell) is not None]
            if pass_rule == ObstaclePassRule.CANNOT_PASS_THROUGH:
                assert not blockers and board.tile_at(pos) is None
            elif pass_rule == ObstaclePassRule.MUST_PASS_THROUGH:
                assert blockers and board.tile_at(pos) is None
            elif pass_rule == ObstaclePassRule.CAN_PASS_THROUGH:
                assert board.tile_at(pos) is None
            elif pass_rule == ObstaclePassRule.PUSH_OBSTACLES:
                assert not blockers
                if board.tile_at(pos) is not None:
                    # The push target is the furthest option along its ray.
                    assert not any(pos in _between(origin, other) for other in result)
