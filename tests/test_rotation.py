"""Tests for the quarter-turn rotation state machine."""
import math

import pytest

from conftest import settle_rotation
from tilt_maze.rotation import QUARTER_TURN, Direction, RotationController, RotationState


class TestRotate:

    def test_starts_idle(self):
        controller = RotationController()
        assert controller.state is RotationState.IDLE
        assert controller.current_rotation == 0.0
        assert controller.target_rotation == 0.0
        assert controller.rotation_count == 0

    def test_right_turn_targets_positive_quarter(self):
        controller = RotationController()
        assert controller.rotate(Direction.RIGHT)
        assert controller.state is RotationState.ROTATING
        assert controller.target_rotation == pytest.approx(math.pi / 2)
        assert controller.rotation_count == 1

    def test_left_turn_targets_negative_quarter(self):
        controller = RotationController()
        controller.rotate("left")
        assert controller.target_rotation == pytest.approx(-math.pi / 2)
        assert controller.orientation == 3

    def test_command_while_rotating_is_dropped(self):
        controller = RotationController()
        controller.rotate(Direction.RIGHT)
        controller.advance()
        target = controller.target_rotation

        assert not controller.rotate(Direction.LEFT)
        assert not controller.rotate(Direction.RIGHT)
        assert controller.target_rotation == target
        assert controller.rotation_count == 1

    def test_unknown_direction_rejected(self):
        controller = RotationController()
        with pytest.raises(ValueError):
            controller.rotate("up")
        assert controller.rotation_count == 0

    def test_four_right_turns_return_to_start(self):
        controller = RotationController()
        for _ in range(4):
            assert controller.rotate(Direction.RIGHT)
            settle_rotation(controller)
            assert not controller.is_rotating

        assert controller.rotation_count == 4
        assert controller.orientation == 0
        assert math.cos(controller.current_rotation) == pytest.approx(1.0)
        assert math.sin(controller.current_rotation) == pytest.approx(0.0, abs=1e-9)

    def test_reset(self):
        controller = RotationController()
        controller.rotate(Direction.RIGHT)
        controller.advance()
        controller.reset()
        assert controller.state is RotationState.IDLE
        assert controller.current_rotation == 0.0
        assert controller.quarter_turns == 0
        assert controller.rotation_count == 0


class TestAdvance:

    def test_idle_advance_does_nothing(self):
        controller = RotationController()
        assert not controller.advance()
        assert controller.current_rotation == 0.0

    def test_eases_toward_target(self):
        controller = RotationController(speed=0.1)
        controller.rotate(Direction.RIGHT)
        controller.advance()
        assert controller.current_rotation == pytest.approx(QUARTER_TURN * 0.1)
        controller.advance()
        assert controller.current_rotation == pytest.approx(QUARTER_TURN * 0.19)

    def test_snaps_to_target_and_reports_completion_once(self):
        controller = RotationController(speed=0.1, epsilon=0.01)
        controller.rotate(Direction.RIGHT)

        completions = 0
        for _ in range(200):
            if controller.advance():
                completions += 1

        assert completions == 1
        assert controller.state is RotationState.IDLE
        assert controller.current_rotation == controller.target_rotation

    def test_turn_takes_finite_frames(self):
        controller = RotationController(speed=0.1, epsilon=0.01)
        controller.rotate(Direction.LEFT)
        frames = settle_rotation(controller)
        # 0.9 ** 48 * (pi / 2) is just under the 0.01 snap threshold
        assert 45 <= frames <= 52
        assert controller.current_rotation == -QUARTER_TURN
