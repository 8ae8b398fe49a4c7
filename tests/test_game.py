"""Tests for the pygame shell, run against SDL's dummy video and audio drivers."""
import threading

import pytest

pygame = pytest.importorskip("pygame")

from tilt_maze.config import GameConfig


@pytest.fixture
def game(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    from tilt_maze.game import Game
    try:
        game = Game(GameConfig(seed=7))
    except pygame.error as exc:
        pytest.skip(f"pygame could not start headless: {exc}")
    yield game
    # Let fire-and-forget sound threads finish before the mixer shuts down.
    for thread in threading.enumerate():
        if thread is not threading.main_thread():
            thread.join(timeout=5)
    pygame.quit()


def place_on_goal(session):
    goal = session.goal_rect
    session.sprite.x = goal.x
    session.sprite.y = goal.y


def test_uses_session_config(game):
    assert game.config is game.session.config
    assert game.screen_width == game.config.view_size


def test_update_stops_ticking_once_solved(game):
    game.update(0)
    assert game.playing

    place_on_goal(game.session)
    game.update(1000)
    assert not game.playing
    assert game.session.game_over

    game.update(5000)
    assert game.session.elapsed_ms == 1000


def test_restart_resumes_ticking(game):
    place_on_goal(game.session)
    game.update(0)
    assert not game.playing

    game.restart()
    assert game.playing
    game.update(200)
    game.update(700)
    assert game.session.elapsed_ms == 500


def test_frame_draws_victory_overlay(game):
    place_on_goal(game.session)
    assert game.frame(0)
    assert game.session.game_over
