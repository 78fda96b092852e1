"""Tests for the frame loop."""

import pytest

from console_snake.config import GameConfig
from console_snake.controls import Key
from console_snake.game import SnakeGame
from console_snake.loop import run_frame, run_game
from console_snake.position import Position
from console_snake.render import BoardRenderer

from conftest import ScriptedKeyboard


def _game(**overrides) -> SnakeGame:
    options = {"width": 10, "height": 10, "initial_score": 3, "seed": 0}
    options.update(overrides)
    game = SnakeGame(GameConfig(**options))
    game.food = Position(8, 8)
    return game


class TestRunFrame:
    def test_renders_polls_and_updates(self, clock, display):
        game = _game()
        keyboard = ScriptedKeyboard([Key.ARROW_DOWN], clock=clock)
        run_frame(game, BoardRenderer(display), keyboard, clock=clock, sleep=clock.sleep)
        assert display.calls[0] == "clear"
        assert game.snake.head == Position(5, 6)
        assert game.tick == 1

    def test_input_poll_fills_frame(self, clock, display):
        game = _game()
        keyboard = ScriptedKeyboard(clock=clock)
        run_frame(game, BoardRenderer(display), keyboard, clock=clock, sleep=clock.sleep)
        assert clock.sleeps == []
        assert clock.now == pytest.approx(0.5)

    def test_sleeps_remainder_of_short_poll(self, clock, display):
        game = _game(input_budget=0.1)
        keyboard = ScriptedKeyboard(clock=clock)
        run_frame(game, BoardRenderer(display), keyboard, clock=clock, sleep=clock.sleep)
        assert clock.sleeps == [pytest.approx(0.4)]
        assert clock.now == pytest.approx(0.5)


class TestRunGame:
    def test_runs_until_wall(self, clock, display):
        game = _game()
        keyboard = ScriptedKeyboard(clock=clock)
        score = run_game(game, display, keyboard, clock=clock, sleep=clock.sleep)
        assert score == 3
        assert game.game_over
        # (6,5), (7,5), (8,5), then the wall at x=9.
        assert game.snake.head == Position(8, 5)
        assert display.calls.count("clear") == 4

    def test_summary_shown_once_and_held(self, clock, display):
        game = _game()
        keyboard = ScriptedKeyboard(clock=clock)
        run_game(game, display, keyboard, clock=clock, sleep=clock.sleep)
        assert display.texts[-1][2] == "Game over, Score: 3"
        assert display.calls.count("write") == 1
        assert clock.sleeps == [2.0]

    def test_no_hold(self, clock, display):
        game = _game(game_over_hold=0)
        keyboard = ScriptedKeyboard(clock=clock)
        run_game(game, display, keyboard, clock=clock, sleep=clock.sleep)
        assert clock.sleeps == []

    def test_key_steers_into_food(self, clock, display):
        game = _game()
        game.food = Position(5, 3)
        renderer = BoardRenderer(display)
        keyboard = ScriptedKeyboard([Key.ARROW_UP], clock=clock)
        run_frame(game, renderer, keyboard, clock=clock, sleep=clock.sleep)
        run_frame(game, renderer, keyboard, clock=clock, sleep=clock.sleep)
        assert game.snake.head == Position(5, 3)
        assert game.score == 4
        assert game.food != Position(5, 3)
