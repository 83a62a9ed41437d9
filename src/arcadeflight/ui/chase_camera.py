"""Chase camera that follows the aircraft.

The camera sits on an orbit around the aircraft that the player can rotate
with a mouse drag and shorten or lengthen with the wheel. The orbit offset
is expressed in the aircraft's frame, so the camera rolls and pitches with
the aircraft.

Typical usage example:
    camera = ChaseCamera()
    camera.orbit(dx=12, dy=-4)
    pose = camera.compute(model.get_state())
"""

import math
from dataclasses import dataclass

from arcadeflight.physics.flight_model.base import AircraftState
from arcadeflight.physics.vectors import Vector3

ORBIT_SENSITIVITY = 0.01
ORBIT_VERTICAL_LIMIT = 1.0
ORBIT_HEIGHT_SCALE = 10.0
MIN_DISTANCE = 5.0
MAX_DISTANCE = 30.0
LOOK_AT_OFFSET = Vector3(0.0, 2.0, 0.0)


@dataclass
class CameraPose:
    """World-space camera placement.

    Attributes:
        position: Camera position.
        look_at: Point the camera is aimed at.
    """

    position: Vector3
    look_at: Vector3


class ChaseCamera:
    """Orbiting follow camera.

    Attributes:
        orbit_x: Horizontal orbit angle in radians.
        orbit_y: Vertical orbit offset (-1.0 to 1.0).
        distance: Orbit radius.
        height: Base height above the aircraft.
    """

    def __init__(self, distance: float = 15.0, height: float = 8.0) -> None:
        self.orbit_x = 0.0
        self.orbit_y = 0.0
        self.distance = max(MIN_DISTANCE, min(MAX_DISTANCE, distance))
        self.height = height

    def orbit(self, dx: float, dy: float) -> None:
        """Rotate the orbit by a mouse movement in pixels."""
        self.orbit_x += dx * ORBIT_SENSITIVITY
        self.orbit_y += dy * ORBIT_SENSITIVITY
        self.orbit_y = max(-ORBIT_VERTICAL_LIMIT, min(ORBIT_VERTICAL_LIMIT, self.orbit_y))

    def zoom(self, delta: float) -> None:
        """Change the orbit radius; positive values move the camera away."""
        self.distance = max(MIN_DISTANCE, min(MAX_DISTANCE, self.distance + delta))

    def compute(self, state: AircraftState) -> CameraPose:
        """Place the camera for the given aircraft state.

        Args:
            state: Current aircraft state.

        Returns:
            Camera position and aim point.
        """
        pitch, yaw, roll = state.get_pitch(), state.get_yaw(), state.get_roll()

        offset = Vector3(
            math.sin(self.orbit_x) * self.distance,
            self.height + self.orbit_y * ORBIT_HEIGHT_SCALE,
            math.cos(self.orbit_x) * self.distance,
        ).apply_euler(pitch, yaw, roll)
        look_offset = LOOK_AT_OFFSET.apply_euler(pitch, yaw, roll)

        return CameraPose(
            position=state.position + offset,
            look_at=state.position + look_offset,
        )
