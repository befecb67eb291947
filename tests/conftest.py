"""Pytest configuration file"""

import pytest
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from omegaconf import OmegaConf

from tests.helpers import RecordingModel


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def call_log():
    """Shared list recording (component, call) tuples in order."""
    return []


@pytest.fixture
def recording_model(call_log):
    """Provide a model that records refreshes."""
    return RecordingModel(call_log)


@pytest.fixture
def wrench_cfg():
    """Provide a force/torque sensor configuration."""
    return OmegaConf.create({
        "type": "force_torque",
        "name": "wrist_ft",
        "frame": "wrist",
        "reverse_wrench_direction": False,
    })


@pytest.fixture
def arm_cfg():
    """Provide a full robot configuration."""
    return OmegaConf.create({
        "name": "arm",
        "joint_names": ["shoulder", "elbow"],
        "frames": [
            {"name": "wrist", "joint": "elbow"},
        ],
        "motors": [
            {"type": "motor", "name": "shoulder_motor", "joint": "shoulder"},
            {"type": "motor", "name": "elbow_motor", "joint": "elbow"},
        ],
        "sensors": [
            {"type": "force_torque", "name": "wrist_ft", "frame": "wrist"},
            {"type": "joint_state", "name": "elbow_encoder", "joint": "elbow"},
        ],
    })
