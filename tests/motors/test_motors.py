"""
Tests for motors and the moving group.
"""

import pytest
from omegaconf import OmegaConf

from mechaframe.core.base import Indexable
from mechaframe.core.lifecycle import LifecycleState
from mechaframe.core.registry import MOTOR_REGISTRY
from mechaframe.motors.base import Motor
from mechaframe.motors.moving_group import MovingGroup
from tests.helpers import PlainActuator, RecordingMotor


class TestMotor:
    """Test suite for Motor."""

    def test_built_from_config(self):
        motor = MOTOR_REGISTRY.build(OmegaConf.create({"type": "motor", "name": "m1", "joint": "knee"}))
        assert isinstance(motor, Motor)
        assert motor.name == "m1"
        assert motor.joint == "knee"
        assert motor.lifecycle_state == LifecycleState.CONSTRUCTED

    def test_not_indexed(self):
        """Test that motors carry a name but no registry index."""
        motor = Motor(OmegaConf.create({"name": "m1"}))
        assert not isinstance(motor, Indexable)
        assert not hasattr(motor, "index")

    def test_command_requires_active(self):
        motor = Motor(OmegaConf.create({"name": "m1"}))
        with pytest.raises(RuntimeError, match="ACTIVE is required"):
            motor.set_command(1.0)

    def test_command_accepted_when_active(self):
        motor = Motor(OmegaConf.create({"name": "m1"}))
        motor.initialize()
        motor.set_up()
        motor.set_command(2)
        assert motor.command == 2.0

    def test_terminate_clears_command(self):
        motor = Motor(OmegaConf.create({"name": "m1"}))
        motor.initialize()
        motor.set_up()
        motor.set_command(2.0)
        motor.terminate()
        assert motor.command == 0.0
        with pytest.raises(RuntimeError):
            motor.set_command(1.0)


class TestMovingGroup:
    """Test suite for MovingGroup."""

    def test_preserves_insertion_order(self, call_log):
        group = MovingGroup()
        a, b = RecordingMotor("a", call_log), PlainActuator("b")
        group.add_moving_component(a)
        group.add_moving_component(b)
        assert group.moving_components == (a, b)
        assert group.num_moving_components == 2

    def test_same_instance_rejected(self, call_log):
        group = MovingGroup()
        motor = RecordingMotor("a", call_log)
        group.add_moving_component(motor)
        with pytest.raises(ValueError, match="already added"):
            group.add_moving_component(motor)
