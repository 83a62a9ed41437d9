"""Tuning constants for the arcade flight model.

Every ramp rate, coefficient and breakpoint used by
:class:`~arcadeflight.physics.flight_model.arcade.ArcadeFlightModel` lives
here with its default value. The defaults reproduce the reference flight
feel; the lift-curve breakpoints and slopes in particular are design
constants, not placeholders.

Units are arbitrary simulation units: distances in world units, speeds in
world units per frame (see ``time_scaled_translation``), angles in radians.

Typical usage example:
    from arcadeflight.physics.flight_model.config import FlightModelConfig

    config = FlightModelConfig.from_yaml("config/aircraft/trainer.yaml")
    model = ArcadeFlightModel(config)
"""

import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class FlightModelConfig:  # pylint: disable=too-many-instance-attributes
    """Flight model constants.

    Attributes are grouped by pipeline stage. Only the non-obvious ones are
    described here.

    Attributes:
        throttle_rate: Throttle change per second while throttle/brake held.
        acceleration_factor: Acceleration is ``throttle * max_speed * factor``.
        deceleration: Speed decay per second at zero throttle.
        stall_altitude: Stall is only declared above this altitude.
        ground_height: Altitude of the aircraft centre with wheels on the ground.
        ground_tolerance: Extra height still counted as runway contact.
        minimum_height: Absolute floor for the ground clamp.
        aoa_low_breakpoint: Below this pitch the lift effect collapses.
        aoa_high_breakpoint: Above this pitch lift falls off (post-stall).
        lift_effect_floor: Lower bound applied to the angle-of-attack effect.
        stall_lift_factor: Lift multiplier while stalling.
        takeoff_speed: Above this speed full lift is applied.
        partial_lift_speed: Between this and takeoff_speed lift is prorated.
        ground_rate_damping: Per-step multiplier on pitch/roll rate on the runway.
        ground_attitude: Tail-dragger resting pitch on the runway.
        control_smoothing: Rate of the exponential approach of control inputs.
        effectiveness_speed: Speed at which controls reach full effectiveness.
        stability_strength: Base strength of the return-to-trim forces.
        angular_damping: Per-second damping rate of all angular rates.
        world_half_extent: X/Z wrap boundary.
        ceiling: Maximum altitude.
        exact_smoothing: Use time-normalised exponentials for control
            smoothing and angular damping instead of the per-frame forms.
        time_scaled_translation: Translate by ``speed * dt * reference_frame_rate``
            instead of ``speed`` per frame.
        reference_frame_rate: Frame rate at which both translation forms agree.
        max_dt: Optional upper bound applied to the time slice.
    """

    # Propulsion
    throttle_rate: float = 0.5
    max_speed: float = 3.5
    acceleration_factor: float = 1.0
    deceleration: float = 0.12

    # Runway / stall classification
    stall_speed: float = 0.3
    stall_altitude: float = 2.0
    runway_half_width: float = 25.0
    runway_half_length: float = 100.0
    ground_height: float = 0.8
    ground_tolerance: float = 0.1
    minimum_height: float = 0.5

    # Aerodynamics
    drag_coefficient: float = 0.08
    lift_coefficient: float = 0.3
    aoa_low_breakpoint: float = -0.3
    aoa_high_breakpoint: float = 0.35
    aoa_low_effect: float = 0.2
    aoa_linear_slope: float = 3.0
    aoa_post_stall_peak: float = 2.0
    aoa_post_stall_slope: float = 2.0
    lift_effect_floor: float = 0.1
    stall_lift_factor: float = 0.2

    # Vertical integration
    takeoff_speed: float = 0.8
    partial_lift_speed: float = 0.4
    gravity: float = 0.3
    stall_gravity_multiplier: float = 2.5

    # Ground contact
    runway_friction: float = 0.2
    rough_ground_friction: float = 0.8
    ground_rate_damping: float = 0.92
    ground_attitude: float = 0.08
    ground_attitude_gain: float = 0.5
    ground_attitude_speed: float = 0.3

    # Control smoothing and auto-trim
    control_smoothing: float = 15.0
    trim_input_deadband: float = 0.1
    trim_min_speed: float = 0.4
    pitch_trim_rate: float = 0.3
    pitch_trim_limit: float = 0.3
    roll_trim_rate: float = 0.5
    roll_trim_limit: float = 0.2

    # Attitude dynamics
    control_sensitivity: float = 1.0
    min_control_speed: float = 0.1
    effectiveness_speed: float = 0.6
    effectiveness_floor: float = 0.1
    pitch_authority: float = 1.0
    roll_authority: float = 1.4
    yaw_authority: float = 0.8
    stability_strength: float = 0.6
    pitch_stability: float = 1.2
    roll_stability: float = 1.8
    yaw_stability: float = 0.5
    angular_damping: float = 2.8
    pitch_limit: float = math.pi / 3
    roll_limit: float = math.pi / 2

    # World
    world_half_extent: float = 800.0
    ceiling: float = 200.0

    # Optional strengthenings (off by default)
    exact_smoothing: bool = False
    time_scaled_translation: bool = False
    reference_frame_rate: float = 60.0
    max_dt: float | None = None

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "FlightModelConfig":
        """Build a config from a mapping, using defaults for missing keys.

        Args:
            config: Mapping of attribute name to value.

        Returns:
            New configuration.

        Raises:
            ValueError: If a key is unknown, a value has the wrong type or a
                number is not finite.
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(str(key) for key in set(config) - set(known))
        if unknown:
            raise ValueError(f"Unknown flight model parameter(s): {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for name, value in config.items():
            default = getattr(cls, name)
            if isinstance(default, bool):
                if not isinstance(value, bool):
                    raise ValueError(f"{name} must be a boolean, got {value!r}")
                values[name] = value
            elif name == "max_dt" and value is None:
                values[name] = None
            else:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"{name} must be a number, got {value!r}")
                if not math.isfinite(value):
                    raise ValueError(f"{name} must be finite, got {value!r}")
                values[name] = float(value)

        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "FlightModelConfig":
        """Load a config from a YAML file.

        The file may either hold the parameters at the top level or under a
        ``flight_model`` key.

        Args:
            path: YAML file path.

        Returns:
            New configuration.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file content is invalid.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Flight model config not found: {path}")

        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in flight model config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Flight model config must be a mapping: {path}")
        if "flight_model" in data:
            data = data["flight_model"] or {}
            if not isinstance(data, dict):
                raise ValueError(f"flight_model section must be a mapping: {path}")

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary (YAML-serialisable)."""
        return asdict(self)
