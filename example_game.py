"""
Example script demonstrating a puzzle session.

This shows how to:
1. Load the tile library
2. Set up a board with explicit placements and an objective
3. Preview moves for a selected tile
4. Execute a simple move and a push move
"""

from infra import DEFAULT_LOGFILE, DEFAULT_TILE_LIBRARY, configure_logging
from puzzle_engine import TileAtPositionObjective, TileLibrary
from runtime import GameSession


def print_board(session: GameSession) -> None:
    print(session.board.render())
    print()


def main():
    """Run an example puzzle."""
    configure_logging("INFO", logfile=DEFAULT_LOGFILE)

    print("Tile Puzzle Engine - Example Session")
    print("=" * 60)

    library = TileLibrary.load_json(DEFAULT_TILE_LIBRARY)
    print(f"Loaded {len(library)} tile definitions: {[d.type_key for d in library.all()]}")

    session = GameSession.from_placements(
        5, 3, library,
        [("Motor", (0, 1)), ("Brain", (2, 1)), ("Coil", (3, 1))],
    )
    session.add_objective(TileAtPositionObjective("Brain", (3, 1)))
    print_board(session)

    # =========================================================================
    # Example 1: Preview the Motor's options (push rules)
    # =========================================================================
    session.select((0, 1))
    options = [option.destination for option in session.preview()]
    print(f"Motor options: {options}")

    # =========================================================================
    # Example 2: Simple move next to the Brain
    # =========================================================================
    result = session.move_selected_to((1, 1))
    print(f"Simple move: success={result.success}")
    print_board(session)

    # =========================================================================
    # Example 3: Push the Brain and the Coil one cell to the right
    # =========================================================================
    session.select((1, 1))
    result = session.move_selected_to((2, 1))
    print(f"Push move: success={result.success}")
    for event in result.relocations:
        print(f"  {event.type_key}: {event.from_pos} -> {event.to_pos}")
    print_board(session)

    print(f"Solved: {session.is_won} after {session.move_count} moves")
    print("=" * 60)


if __name__ == "__main__":
    main()
