"""
mechaframe example - minimal control loop

Assembles a two-joint arm from configuration, runs the lifecycle and a few
update cycles with synthetic joint and wrench data.

Usage:
    python examples/force_torque_loop.py
    python examples/force_torque_loop.py --steps 50 --reverse
"""

import argparse
import logging

import numpy as np
from omegaconf import OmegaConf

from mechaframe import Robot


def main():
    parser = argparse.ArgumentParser(description="mechaframe force/torque loop")
    parser.add_argument("--steps", type=int, default=10, help="Number of update cycles")
    parser.add_argument("--reverse", action="store_true", help="Reverse wrench direction")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    cfg = OmegaConf.create({
        "name": "arm",
        "joint_names": ["shoulder", "elbow"],
        "frames": [{"name": "wrist", "joint": "elbow"}],
        "motors": [
            {"type": "motor", "name": "shoulder_motor", "joint": "shoulder"},
            {"type": "motor", "name": "elbow_motor", "joint": "elbow"},
        ],
        "sensors": [
            {
                "type": "force_torque",
                "name": "wrist_ft",
                "frame": "wrist",
                "reverse_wrench_direction": args.reverse,
            },
            {"type": "joint_state", "name": "elbow_encoder", "joint": "elbow"},
        ],
    })

    robot = Robot.from_config(cfg)
    rng = np.random.default_rng(0)
    robot.get_component("wrist_ft").set_wrench_source(lambda: rng.normal(size=6))

    robot.initialize()
    robot.set_up()

    for step in range(args.steps):
        t = 0.01 * step
        robot.model.set_state([np.sin(t), np.cos(t)], [np.cos(t), -np.sin(t)])
        robot.update_all_states()

        wrench = robot.get_component("wrist_ft").get_value()
        encoder = robot.get_component("elbow_encoder").get_value()
        robot.moving_components[1].set_command(-0.1 * encoder[0])
        print(f"Step {step}: q={robot.get_joint_positions()}, |f|={np.linalg.norm(wrench[:3]):.3f}")

    robot.terminate()


if __name__ == "__main__":
    main()
