"""Minimal 3D vector type for the flight model.

World axes: +X is right, +Y is up, +Z is the aircraft's forward axis when
all Euler angles are zero.

Typical usage example:
    from arcadeflight.physics.vectors import Vector3

    forward = Vector3(0.0, 0.0, 1.0).apply_euler(pitch, yaw, roll)
"""

import math
from dataclasses import dataclass


@dataclass
class Vector3:
    """Mutable 3D vector.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def zero() -> "Vector3":
        """Create a zero vector."""
        return Vector3(0.0, 0.0, 0.0)

    def copy(self) -> "Vector3":
        """Return an independent copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def magnitude_squared(self) -> float:
        """Squared length (avoids the square root)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.magnitude_squared())

    def apply_euler(self, pitch: float, yaw: float, roll: float) -> "Vector3":
        """Rotate this vector by an XYZ-ordered Euler rotation.

        The rotation matrix is ``Rx(pitch) @ Ry(yaw) @ Rz(roll)``, so roll is
        applied to the vector first and pitch last.

        Args:
            pitch: Rotation about X in radians.
            yaw: Rotation about Y in radians.
            roll: Rotation about Z in radians.

        Returns:
            New rotated vector (this vector is not modified).
        """
        cos_p, sin_p = math.cos(pitch), math.sin(pitch)
        cos_y, sin_y = math.cos(yaw), math.sin(yaw)
        cos_r, sin_r = math.cos(roll), math.sin(roll)

        # Rz
        x1 = self.x * cos_r - self.y * sin_r
        y1 = self.x * sin_r + self.y * cos_r
        z1 = self.z

        # Ry
        x2 = x1 * cos_y + z1 * sin_y
        y2 = y1
        z2 = -x1 * sin_y + z1 * cos_y

        # Rx
        return Vector3(
            x2,
            y2 * cos_p - z2 * sin_p,
            y2 * sin_p + z2 * cos_p,
        )

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"
