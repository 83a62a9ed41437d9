"""Renderer-side view of the aircraft.

Converts the flight state into what a renderer needs each frame: the
position, the attitude in yaw-pitch-roll application order and the
accumulated propeller blade angle.
"""

import math
from dataclasses import dataclass

from arcadeflight.physics.flight_model.base import AircraftState
from arcadeflight.physics.vectors import Vector3

# Renderers apply yaw first, then pitch, then roll
ROTATION_ORDER = "YXZ"


def propeller_spin_rate(throttle: float, speed: float) -> float:
    """Propeller blade rotation per frame in radians."""
    return throttle * 0.8 + speed * 0.2


@dataclass
class AircraftPose:
    """Aircraft placement for the renderer.

    Attributes:
        position: World position.
        pitch: Rotation about X in radians.
        yaw: Rotation about Y in radians.
        roll: Rotation about Z in radians.
        order: Euler application order.
    """

    position: Vector3
    pitch: float
    yaw: float
    roll: float
    order: str = ROTATION_ORDER


class AircraftView:
    """Tracks per-frame render values that are not part of the physics."""

    def __init__(self) -> None:
        self.propeller_angle = 0.0
        self.pose = AircraftPose(Vector3.zero(), 0.0, 0.0, 0.0)

    def update(self, state: AircraftState) -> AircraftPose:
        """Refresh the pose and spin the propeller for one frame.

        Args:
            state: Current aircraft state.

        Returns:
            Current pose.
        """
        self.pose = AircraftPose(
            position=state.position.copy(),
            pitch=state.get_pitch(),
            yaw=state.get_yaw(),
            roll=state.get_roll(),
        )
        self.propeller_angle = (
            self.propeller_angle + propeller_spin_rate(state.throttle, state.speed)
        ) % (2.0 * math.pi)
        return self.pose

    def heading_degrees(self) -> float:
        """Yaw as a compass-style heading in [0, 360)."""
        return math.degrees(self.pose.yaw) % 360.0
