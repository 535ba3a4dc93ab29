from typing import List

import pytest

from mnkgame.console import parse_position, play, render_board
from mnkgame.game import Game
from mnkgame.game_basics import BoardGeometry, Move, Position, deserialize_board


def scripted(answers: List[str]):
    it = iter(answers)
    prompts: List[str] = []

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        return next(it)

    return ask, prompts


def test_render_board():
    assert render_board(deserialize_board("XO./.../..X")) == "X|O|.\n-----\n.|.|.\n-----\n.|.|X"
    assert render_board(deserialize_board("X.")) == "X|."


def test_parse_position():
    game = Game(BoardGeometry(3, 3), 3)
    assert parse_position(" 0, 2 ", game) == Position(game.geometry, 0, 2)
    for bad in ["abc", "1", "1,2,3", "a,b", "3,0"]:
        with pytest.raises(ValueError):
            parse_position(bad, game)


def test_human_wins_after_invalid_inputs():
    game = Game(BoardGeometry(2, 2), 2)
    # AI (O) answers 0,0 with 0,1, the first of its equally lost replies
    ask, _ = scripted(["x", "0,0", "0,1", "abc", "1,1"])
    lines: List[str] = []
    result = play(game, ask=ask, out=lines.append)
    assert result == "X"
    assert lines[0] == "Welcome to Tic-Tac-Toe!"
    assert "AI plays:" in lines
    assert sum(1 for line in lines if line.startswith("Invalid move:")) == 2
    assert lines[-1] == "You win!"
    assert len(game.history()) == 3


def test_ai_wins_when_it_moves_first():
    game = Game(BoardGeometry(2, 2), 2)
    ask, prompts = scripted(["1,1"])
    lines: List[str] = []
    result = play(game, ask=ask, out=lines.append, human_mark="O")
    assert result == "X"
    assert lines[-1] == "AI wins!"
    assert len(prompts) == 1
    assert game.current_state().at(0, 0) == "X"
    assert game.current_state().at(0, 1) == "X"


def test_draw_on_strip():
    game = Game(BoardGeometry(1, 3), 3)
    ask, _ = scripted(["0,0", "0,2"])
    lines: List[str] = []
    assert play(game, ask=ask, out=lines.append, human_mark="X") == "draw"
    assert lines[-1] == "Draw!"


def test_mark_prompt_repeats_until_valid():
    game = Game(BoardGeometry(2, 2), 2)
    ask, prompts = scripted(["q", "", "o", "1,1"])
    lines: List[str] = []
    play(game, ask=ask, out=lines.append)
    assert sum(1 for p in prompts if "'X' or 'O'" in p) == 3


def test_finished_game_is_reported_without_prompting():
    game = Game(BoardGeometry(1, 2), 2)
    game.make_move(Move(Position(game.geometry, 0, 0), "X"))
    game.make_move(Move(Position(game.geometry, 0, 1), "O"))
    ask, prompts = scripted([])
    lines: List[str] = []
    assert play(game, ask=ask, out=lines.append, human_mark="X") == "draw"
    assert prompts == []
    assert lines[-1] == "Draw!"
    assert not any(line.startswith("Invalid move:") for line in lines)
