import pytest

from puzzle_engine.board import BoardState
from puzzle_engine.core import BoardInvariantError, CellPos, MovementRules
from puzzle_engine.mechanics import MoveExecutor, ObjectiveEvaluator, TileAtPositionObjective
from runtime.events import MoveRecorder


@pytest.fixture
def recorder():
    return MoveRecorder()


@pytest.fixture
def executor(board, recorder):
    return MoveExecutor(board, presenter=recorder)


@pytest.fixture
def tile_a(board, make_tile):
    tile = make_tile("A", MovementRules(10, True, True))
    board.try_place_tile(CellPos(0, 0), tile)
    return tile


def test_simple_move_updates_board_and_notifies(board, executor, recorder, tile_a):
    assert executor.execute_move(CellPos(0, 0), CellPos(1, 1)) is True

    assert board.tile_at(CellPos(0, 0)) is None
    assert board.tile_at(CellPos(1, 1)) is tile_a
    assert [(e.type_key, e.from_pos, e.to_pos) for e in recorder.events] == [
        ("A", CellPos(0, 0), CellPos(1, 1)),
    ]
    assert recorder.events[0].pushed is False


def test_plain_tuples_are_accepted(board, executor, tile_a):
    assert executor.execute_move((0, 0), (2, 0)) is True
    assert board.tile_at(CellPos(2, 0)) is tile_a


@pytest.mark.parametrize("from_pos, to_pos, reason", [
    ((0, 0), (10, 10), "OUT_OF_BOUNDS"),
    ((-1, 0), (1, 1), "OUT_OF_BOUNDS"),
    ((2, 2), (1, 1), "NO_TILE"),
    ((0, 0), (0, 0), "NO_DIRECTION"),
])
def test_invalid_requests_are_rejected_without_mutation(board, executor, recorder, tile_a, from_pos, to_pos, reason):
    before = board.to_dict()

    for _ in range(3):
        result = executor.resolve_move(CellPos(*from_pos), CellPos(*to_pos))
        assert result.success is False
        assert result.failure_reason == reason
        assert executor.execute_move(CellPos(*from_pos), CellPos(*to_pos)) is False

    assert board.to_dict() == before
    assert recorder.events == []


def test_push_single_tile(board, executor, recorder, tile_a, make_tile):
    tile_b = make_tile("B")
    board.try_place_tile(CellPos(1, 0), tile_b)

    result = executor.resolve_move(CellPos(0, 0), CellPos(1, 0))

    assert result.success is True
    assert result.pushed is True
    assert board.tile_at(CellPos(2, 0)) is tile_b
    assert board.tile_at(CellPos(1, 0)) is tile_a
    assert board.tile_at(CellPos(0, 0)) is None
    assert [(e.type_key, e.from_pos, e.to_pos) for e in recorder.events] == [
        ("B", CellPos(1, 0), CellPos(2, 0)),
        ("A", CellPos(0, 0), CellPos(1, 0)),
    ]
    assert [e.pushed for e in recorder.events] == [True, False]
    assert result.relocations == recorder.events


def test_push_blocked_by_board_edge(board, executor, recorder, tile_a, make_tile):
    board.try_place_tile(CellPos(1, 0), make_tile("B"))
    board.try_place_tile(CellPos(2, 0), make_tile("C"))
    before = board.to_dict()

    result = executor.resolve_move(CellPos(0, 0), CellPos(1, 0))

    assert result.success is False
    assert result.failure_reason == "PUSH_OUT_OF_BOUNDS"
    assert board.to_dict() == before
    assert recorder.events == []


def test_push_chain_moves_back_to_front(make_tile):
    board = BoardState(5, 1)
    recorder = MoveRecorder()
    executor = MoveExecutor(board, presenter=recorder)
    a, b, c, d = (make_tile(key) for key in "ABCD")
    for x, tile in enumerate((a, b, c, d)):
        board.try_place_tile(CellPos(x, 0), tile)

    assert executor.execute_move(CellPos(0, 0), CellPos(1, 0)) is True

    assert [board.tile_at(CellPos(x, 0)) for x in range(5)] == [None, a, b, c, d]
    assert [e.type_key for e in recorder.events] == ["D", "C", "B", "A"]
    assert [(e.from_pos.x, e.to_pos.x) for e in recorder.events] == [(3, 4), (2, 3), (1, 2), (0, 1)]


def test_push_stops_at_first_gap(make_tile):
    board = BoardState(5, 1)
    executor = MoveExecutor(board)
    a, b, c = make_tile("A"), make_tile("B"), make_tile("C")
    board.try_place_tile(CellPos(0, 0), a)
    board.try_place_tile(CellPos(1, 0), b)
    board.try_place_tile(CellPos(3, 0), c)

    assert executor.execute_move(CellPos(0, 0), CellPos(1, 0)) is True

    assert board.tile_at(CellPos(2, 0)) is b
    assert board.tile_at(CellPos(3, 0)) is c


def test_push_is_atomic_when_chain_is_full(make_tile):
    board = BoardState(4, 1)
    executor = MoveExecutor(board)
    for x, key in enumerate("ABCD"):
        board.try_place_tile(CellPos(x, 0), make_tile(key))
    before = board.to_dict()

    assert executor.execute_move(CellPos(0, 0), CellPos(1, 0)) is False
    assert board.to_dict() == before


def test_multi_step_push_collapses_to_unit_direction(make_tile):
    board = BoardState(5, 1)
    executor = MoveExecutor(board)
    a, b = make_tile("A"), make_tile("B")
    board.try_place_tile(CellPos(0, 0), a)
    board.try_place_tile(CellPos(2, 0), b)

    assert executor.execute_move(CellPos(0, 0), CellPos(2, 0)) is True

    assert board.tile_at(CellPos(0, 0)) is None
    assert board.tile_at(CellPos(2, 0)) is a
    assert board.tile_at(CellPos(3, 0)) is b


def test_diagonal_push(board, make_tile):
    executor = MoveExecutor(board)
    a, b = make_tile("A"), make_tile("B")
    board.try_place_tile(CellPos(0, 0), a)
    board.try_place_tile(CellPos(1, 1), b)

    assert executor.execute_move(CellPos(0, 0), CellPos(1, 1)) is True

    assert board.tile_at(CellPos(1, 1)) is a
    assert board.tile_at(CellPos(2, 2)) is b


def test_find_push_chain_requires_direction(board, executor):
    with pytest.raises(BoardInvariantError):
        executor.find_push_chain(CellPos(0, 0), (0, 0))


def test_objectives_evaluated_after_successful_move(board, tile_a):
    completed = []
    evaluator = ObjectiveEvaluator(on_all_completed=lambda: completed.append(True))
    evaluator.add_objective(TileAtPositionObjective("A", (2, 0)))
    executor = MoveExecutor(board, objectives=evaluator)

    executor.execute_move(CellPos(0, 0), CellPos(1, 0))
    assert evaluator.is_won is False

    executor.execute_move(CellPos(1, 0), CellPos(2, 0))
    assert evaluator.is_won is True
    assert completed == [True]


def test_rejected_move_does_not_evaluate_objectives(board, tile_a):
    calls = []

    class CountingEvaluator(ObjectiveEvaluator):
        def evaluate(self, board):
            calls.append(board)
            return super().evaluate(board)

    executor = MoveExecutor(board, objectives=CountingEvaluator())
    executor.execute_move(CellPos(2, 2), CellPos(1, 1))

    assert calls == []


def test_move_result_to_dict(board, executor, tile_a):
    data = executor.resolve_move(CellPos(0, 0), CellPos(0, 1)).to_dict()

    assert data["success"] is True
    assert data["from_pos"] == [0, 0]
    assert data["to_pos"] == [0, 1]
    assert data["relocations"][0]["tile_id"] == tile_a.id
    assert data["failure_reason"] is None
