"""Core types shared by flight models and their consumers.

Typical usage example:
    from arcadeflight.physics.flight_model.base import AircraftState, FlightControls

    state = AircraftState.initial()
    controls = FlightControls(throttle=True)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from arcadeflight.physics.vectors import Vector3

INITIAL_POSITION = (0.0, 0.8, -50.0)


@dataclass
class AircraftState:  # pylint: disable=too-many-instance-attributes
    """Complete kinematic and aerodynamic state of the aircraft.

    Rotation and angular velocity use the same axis mapping:
    ``x`` is pitch, ``y`` is yaw and ``z`` is roll, in radians.

    Attributes:
        throttle: Commanded power level (0.0 to 1.0).
        speed: Scalar forward airspeed (>= 0).
        position: World position; ``y`` is altitude.
        rotation: Euler attitude (pitch, yaw, roll).
        angular_velocity: Per-axis rotation rate.
        lift: Lift computed on the last step.
        drag: Drag computed on the last step.
        is_gear_down: Landing gear position.
        is_on_runway: Whether the aircraft is in contact with the runway.
        is_stalling: Whether the aircraft is stalled.
        stall_speed: Speed below which an airborne aircraft stalls.
        pitch_input: Smoothed pitch control (-1.0 to 1.0).
        roll_input: Smoothed roll control (-1.0 to 1.0).
        yaw_input: Smoothed yaw control (-1.0 to 1.0).
        pitch_trim: Neutral pitch attitude offset.
        roll_trim: Neutral roll attitude offset.
        gear_toggled: True only for the step that consumed a gear toggle.
    """

    throttle: float = 0.0
    speed: float = 0.0
    position: Vector3 = field(default_factory=lambda: Vector3(*INITIAL_POSITION))
    rotation: Vector3 = field(default_factory=Vector3.zero)
    angular_velocity: Vector3 = field(default_factory=Vector3.zero)
    lift: float = 0.0
    drag: float = 0.0
    is_gear_down: bool = True
    is_on_runway: bool = False
    is_stalling: bool = False
    stall_speed: float = 0.3
    pitch_input: float = 0.0
    roll_input: float = 0.0
    yaw_input: float = 0.0
    pitch_trim: float = 0.0
    roll_trim: float = 0.0
    gear_toggled: bool = False

    @classmethod
    def initial(cls, stall_speed: float = 0.3) -> "AircraftState":
        """Create the start-of-session state: parked on the runway, gear down."""
        return cls(stall_speed=stall_speed)

    def get_pitch(self) -> float:
        """Get pitch angle in radians (also used as the angle of attack)."""
        return self.rotation.x

    def get_yaw(self) -> float:
        """Get yaw angle in radians."""
        return self.rotation.y

    def get_roll(self) -> float:
        """Get roll angle in radians."""
        return self.rotation.z

    def get_altitude(self) -> float:
        """Get altitude (world Y)."""
        return self.position.y


@dataclass(frozen=True)
class FlightControls:  # pylint: disable=too-many-instance-attributes
    """Discrete control flags for one frame.

    All fields except ``landing_gear`` describe keys that are held down.
    ``landing_gear`` is a one-shot command: the flight model toggles the
    gear once for every ``FlightControls`` value that carries it. Producers
    must not resubmit a request that has already been delivered.
    """

    throttle: bool = False
    brake: bool = False
    left: bool = False
    right: bool = False
    pitch_up: bool = False
    pitch_down: bool = False
    yaw_left: bool = False
    yaw_right: bool = False
    landing_gear: bool = False


class IFlightModel(ABC):
    """Interface for flight models driven once per frame."""

    @abstractmethod
    def advance(self, controls: FlightControls, dt: float) -> AircraftState:
        """Advance the simulation by one frame.

        Args:
            controls: Control flags for this frame.
            dt: Elapsed time in seconds.

        Returns:
            Updated state (reference to internal state).
        """

    @abstractmethod
    def get_state(self) -> AircraftState:
        """Get the current state."""

    @abstractmethod
    def reset(self, initial_state: AircraftState | None = None) -> None:
        """Reset to a new state (the start-of-session state when None)."""
