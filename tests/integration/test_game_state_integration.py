import random
from pathlib import Path

from pacman_world.actions import Action
from pacman_world.components import Position
from pacman_world.config import ScoreConfig
from pacman_world.game import GameState
from pacman_world.types import Cell
from tests.test_utils import CLASSIC_TEXT, ScriptedRandom, count_cells, make_level


def make_game(tmp_path: Path, seed: int = 0) -> GameState:
    path = tmp_path / "level.txt"
    path.write_text(CLASSIC_TEXT)
    return GameState.from_file(str(path), rng=random.Random(seed))


def test_from_file_starts_a_game(tmp_path: Path) -> None:
    game = make_game(tmp_path)

    assert (game.width, game.height) == (7, 5)
    assert game.player == Position(1, 1)
    assert game.score == 0
    assert game.state.games == 1
    assert game.cell_at(Position(0, 0)) == Cell.WALL
    assert count_cells(game.state, Cell.EMPTY) == 0
    assert len(game.grid) == 5 and len(game.grid[0]) == 7


def test_handle_input_and_tick_update_state() -> None:
    # enemy and bonus are both sealed in at (5, 1)
    level = make_level(["#######", "#...#.#", "#######"], start=(1, 1))
    rng = ScriptedRandom(floats=[0.1, 0.9, 0.9, 0.1], ints=[5, 1, 5, 1])
    game = GameState(level, rng=rng)

    game.handle_input(Action.RIGHT)

    assert game.player == Position(2, 1)
    assert game.score == 5
    assert game.cell_at(Position(1, 1)) == Cell.YELLOW_PELLET
    assert game.cell_at(Position(2, 1)) == Cell.EMPTY

    game.tick()

    assert game.state.turn == 1
    assert game.state.games == 1
    assert game.enemy == Position(5, 1)
    assert game.state.bonus == Position(5, 1)
    assert game.score == 5
    assert rng.exhausted


def test_reset_restores_start(tmp_path: Path) -> None:
    game = make_game(tmp_path)
    game.handle_input(Action.RIGHT)
    game.handle_input(Action.RIGHT)

    game.reset()

    assert game.player == Position(1, 1)
    assert game.score == 0
    assert game.state.games == 2
    assert count_cells(game.state, Cell.EMPTY) == 0


def test_same_seed_same_game() -> None:
    level = make_level(
        ["#####", "#...#", "#.#.#", "#...#", "#####"], bonus_probability=0.5
    )
    games = [GameState(level, rng=random.Random(9)) for _ in range(2)]
    for action in [Action.RIGHT, Action.DOWN, Action.WAIT, Action.LEFT] * 10:
        for game in games:
            game.handle_input(action)
            game.tick()
    assert games[0].state == games[1].state


def test_custom_scores() -> None:
    level = make_level(["#....#"], start=(1, 0))
    game = GameState(
        level,
        rng=random.Random(1),
        scores=ScoreConfig(yellow_pellet=1, pink_pellet=1, bonus=0),
    )
    game.handle_input(Action.WAIT)
    assert game.score == 1


def test_default_rng_is_created() -> None:
    game = GameState(make_level(["#...#"], start=(1, 0)))
    game.tick()
    assert game.cell_at(game.enemy) != Cell.WALL
