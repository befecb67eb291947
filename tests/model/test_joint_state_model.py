"""
Tests for the numpy-backed joint-state model.
"""

import gc

import numpy as np
import pytest

from mechaframe.model.base import Frame
from mechaframe.model.joint_state_model import JointStateModel


class TestJointStateModel:
    """Test suite for JointStateModel."""

    def test_storage_sized_by_joints(self):
        """Test that positions and velocities have one entry per joint."""
        model = JointStateModel(["a", "b", "c"])
        assert model.num_dofs == 3
        assert model.get_positions().shape == (3,)
        assert np.all(model.get_velocities() == 0)

    def test_duplicate_joint_names_rejected(self):
        with pytest.raises(ValueError, match="unique"):
            JointStateModel(["a", "a"])

    def test_views_are_read_only(self):
        """Test that callers cannot write through the views."""
        model = JointStateModel(["a"])
        with pytest.raises(ValueError):
            model.get_positions()[0] = 1.0

    def test_views_track_refresh(self):
        """Test that an earlier view shows data from a later refresh."""
        samples = iter([
            (np.array([1.0, 2.0]), np.array([0.1, 0.2])),
            (np.array([3.0, 4.0]), np.array([0.3, 0.4])),
        ])
        model = JointStateModel(["a", "b"], state_reader=lambda: next(samples))
        q = model.get_positions()
        v = model.get_velocities()

        model.update_joint_states()
        assert np.array_equal(q, [1.0, 2.0])

        model.update_joint_states()
        assert np.array_equal(q, [3.0, 4.0])
        assert np.allclose(v, [0.3, 0.4])

    def test_update_without_reader_keeps_state(self):
        model = JointStateModel(["a"])
        model.set_state([2.0], [1.0])
        model.update_joint_states()
        assert model.get_positions()[0] == 2.0

    def test_set_state_shape_mismatch(self):
        model = JointStateModel(["a", "b"])
        with pytest.raises(ValueError, match="positions"):
            model.set_state([1.0], [1.0, 2.0])

    def test_dof_index_lookup(self):
        model = JointStateModel(["a", "b"])
        assert model.get_dof_index("b") == 1
        with pytest.raises(KeyError, match="Available"):
            model.get_dof_index("z")


class TestFrame:
    """Tests for frames and their weak back-reference."""

    def test_add_and_get_frame(self):
        model = JointStateModel(["a", "b"])
        frame = model.add_frame("tool", joint_name="b")
        assert model.get_frame("tool") is frame
        assert frame.dof_index == 1
        assert frame.model is model

    def test_duplicate_frame_rejected(self):
        model = JointStateModel()
        model.add_frame("tool")
        with pytest.raises(KeyError, match="already exists"):
            model.add_frame("tool")

    def test_missing_frame_raises(self):
        model = JointStateModel()
        with pytest.raises(KeyError, match="not found"):
            model.get_frame("tool")

    def test_frame_does_not_keep_model_alive(self):
        """Test that a frame reports the model as gone once it is released."""
        model = JointStateModel()
        frame = Frame("detached", model)
        del model
        gc.collect()

        assert not frame.is_valid
        with pytest.raises(RuntimeError, match="no longer exists"):
            frame.model
