"""Arcade flight model with lift curve, stall, ground contact and auto-trim.

This module provides a deliberately simplified fixed-wing model tuned for
keyboard flying. There is no mass or inertia: speed is a scalar driven by
throttle, lift moves the aircraft vertically, and attitude follows control
torques, return-to-trim stability and damping.

Each call to :meth:`ArcadeFlightModel.advance` runs these stages in order:

1. Propulsion and speed
2. Runway detection and stall classification
3. Lift and drag
4. Vertical integration and ground contact
5. Control smoothing and auto-trim
6. Attitude dynamics
7. Landing gear toggle
8. Translation and world wrap

Note:
    Control smoothing and angular damping are per-frame explicit forms.
    They are only well behaved while ``dt`` stays small compared to
    ``1 / control_smoothing`` (about 0.067 s with defaults). Set
    ``FlightModelConfig.exact_smoothing`` for irregular frame timing.

Typical usage example:
    from arcadeflight.physics.flight_model.arcade import ArcadeFlightModel
    from arcadeflight.physics.flight_model.base import FlightControls

    model = ArcadeFlightModel()
    state = model.advance(FlightControls(throttle=True), dt=0.016)
"""

import math

from arcadeflight.core.logging_system import get_logger
from arcadeflight.physics.flight_model.base import AircraftState, FlightControls, IFlightModel
from arcadeflight.physics.flight_model.config import FlightModelConfig
from arcadeflight.physics.vectors import Vector3

logger = get_logger(__name__)

FORWARD_AXIS = Vector3(0.0, 0.0, 1.0)

# Debug state dump interval (frames)
STATE_LOG_INTERVAL = 60


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value to [low, high]."""
    return max(low, min(high, value))


def angle_of_attack_effect(angle_of_attack: float, config: FlightModelConfig) -> float:
    """Evaluate the piecewise lift response curve.

    Args:
        angle_of_attack: Pitch angle in radians.
        config: Flight model constants.

    Returns:
        Lift multiplier before the floor is applied.
    """
    if angle_of_attack < config.aoa_low_breakpoint:
        # Nose too low: lift collapses
        return config.aoa_low_effect
    if angle_of_attack <= config.aoa_high_breakpoint:
        return 1.0 + config.aoa_linear_slope * angle_of_attack
    # Post-stall falloff
    return config.aoa_post_stall_peak - config.aoa_post_stall_slope * (
        angle_of_attack - config.aoa_high_breakpoint
    )


def wrap_coordinate(value: float, half_extent: float) -> float:
    """Wrap a coordinate onto [-half_extent, half_extent], keeping the overshoot."""
    span = 2.0 * half_extent
    if value > half_extent:
        return (value + half_extent) % span - half_extent
    if value < -half_extent:
        return half_extent - (half_extent - value) % span
    return value


class ArcadeFlightModel(IFlightModel):
    """Arcade flight dynamics for a single aircraft.

    The model owns its :class:`AircraftState` and mutates it in place. It
    never raises from :meth:`advance`: invalid time slices are logged and
    treated as zero.

    Examples:
        >>> model = ArcadeFlightModel()
        >>> for _ in range(120):
        ...     state = model.advance(FlightControls(throttle=True), 0.016)
        >>> state.throttle > 0.9
        True
    """

    def __init__(self, config: FlightModelConfig | None = None) -> None:
        """Initialize the flight model.

        Args:
            config: Flight model constants (defaults if None).
        """
        self.config = config if config is not None else FlightModelConfig()
        self.state = AircraftState.initial(stall_speed=self.config.stall_speed)
        self._updates = 0

        logger.info(
            "Initialized arcade flight model: max_speed=%.2f, stall_speed=%.2f, "
            "exact_smoothing=%s, time_scaled_translation=%s",
            self.config.max_speed,
            self.config.stall_speed,
            self.config.exact_smoothing,
            self.config.time_scaled_translation,
        )

    def initialize(self, config: dict) -> None:
        """Reconfigure the model from a parameter mapping.

        The current state is kept; only the constants change.

        Args:
            config: Parameter overrides (see :class:`FlightModelConfig`).

        Raises:
            ValueError: If a parameter is unknown or has the wrong type.
        """
        self.config = FlightModelConfig.from_dict(config)
        self.state.stall_speed = self.config.stall_speed
        logger.info("Reconfigured arcade flight model with %d override(s)", len(config))

    def advance(self, controls: FlightControls, dt: float) -> AircraftState:
        """Advance the simulation by one frame.

        Args:
            controls: Control flags for this frame. Not modified.
            dt: Elapsed time in seconds. Negative or non-finite values are
                treated as 0.0. A zero slice is a paused frame that only
                consumes the gear command.

        Returns:
            Updated state (reference to internal state).
        """
        dt = self._sanitize_dt(dt)
        self._updates += 1

        if dt == 0.0:
            # Paused frame: only the gear command is consumed
            self._update_gear(controls)
            return self.state

        was_stalling = self.state.is_stalling
        was_on_runway = self.state.is_on_runway

        self._update_propulsion(controls, dt)
        self._classify_ground_and_stall()
        self._update_aerodynamics()
        self._integrate_vertical(dt)
        self._update_control_inputs(controls, dt)
        self._update_trim(dt)
        self._update_attitude(dt)
        self._update_gear(controls)
        self._translate(dt)

        if self.state.is_stalling != was_stalling:
            if self.state.is_stalling:
                logger.info(
                    "Stall: speed=%.3f altitude=%.1f",
                    self.state.speed,
                    self.state.position.y,
                )
            else:
                logger.info("Stall recovered: speed=%.3f", self.state.speed)
        if self.state.is_on_runway != was_on_runway:
            logger.debug(
                "Runway contact %s at %s",
                "gained" if self.state.is_on_runway else "lost",
                self.state.position,
            )

        if self._updates % STATE_LOG_INTERVAL == 0:
            logger.debug(
                "[STATE] pos=%s rot=%s spd=%.3f thr=%.2f lift=%.3f drag=%.4f trim=(%.3f, %.3f)",
                self.state.position,
                self.state.rotation,
                self.state.speed,
                self.state.throttle,
                self.state.lift,
                self.state.drag,
                self.state.pitch_trim,
                self.state.roll_trim,
            )

        return self.state

    def _sanitize_dt(self, dt: float) -> float:
        """Replace unusable time slices.

        Args:
            dt: Raw time slice.

        Returns:
            A finite, non-negative time slice, capped at ``max_dt`` if set.
        """
        if not math.isfinite(dt) or dt < 0.0:
            logger.warning("Ignoring invalid time slice dt=%r", dt)
            return 0.0
        if self.config.max_dt is not None and dt > self.config.max_dt:
            logger.debug("Clamping dt=%.3f to max_dt=%.3f", dt, self.config.max_dt)
            return self.config.max_dt
        return dt

    def _update_propulsion(self, controls: FlightControls, dt: float) -> None:
        """Ramp the throttle and move speed toward the throttle target."""
        cfg = self.config
        state = self.state

        if controls.throttle:
            state.throttle = min(state.throttle + cfg.throttle_rate * dt, 1.0)
        if controls.brake:
            state.throttle = max(state.throttle - cfg.throttle_rate * dt, 0.0)

        if state.throttle > 0.0:
            acceleration = state.throttle * cfg.max_speed * cfg.acceleration_factor
            state.speed = min(state.speed + acceleration * dt, cfg.max_speed * state.throttle)
        else:
            state.speed = max(state.speed - cfg.deceleration * dt, 0.0)

        # state.drag still holds the previous frame's value here; drag is
        # recomputed from the new speed only after this point
        state.speed = max(state.speed - state.drag * dt, 0.0)

    def _classify_ground_and_stall(self) -> None:
        """Recompute the runway-contact and stall flags."""
        cfg = self.config
        state = self.state
        pos = state.position

        within_runway = (
            abs(pos.z) < cfg.runway_half_length and abs(pos.x) < cfg.runway_half_width
        )
        state.is_on_runway = within_runway and pos.y <= cfg.ground_height + cfg.ground_tolerance

        state.is_stalling = (
            state.speed < state.stall_speed
            and not state.is_on_runway
            and pos.y > cfg.stall_altitude
        )

    def _update_aerodynamics(self) -> None:
        """Compute drag and lift from the current speed and pitch."""
        cfg = self.config
        state = self.state

        speed_squared = state.speed * state.speed
        state.drag = speed_squared * cfg.drag_coefficient

        effect = angle_of_attack_effect(state.get_pitch(), cfg)
        lift = speed_squared * cfg.lift_coefficient * max(cfg.lift_effect_floor, effect)
        if state.is_stalling:
            lift *= cfg.stall_lift_factor
        state.lift = lift

    def _integrate_vertical(self, dt: float) -> None:
        """Apply lift and gravity to altitude, then resolve ground contact."""
        cfg = self.config
        state = self.state
        pos = state.position

        if state.speed > cfg.takeoff_speed:
            pos.y += state.lift * dt
        elif state.speed > cfg.partial_lift_speed:
            pos.y += state.lift * dt * (state.speed / cfg.takeoff_speed)

        if not state.is_on_runway:
            multiplier = cfg.stall_gravity_multiplier if state.is_stalling else 1.0
            pos.y -= cfg.gravity * dt * multiplier

        if pos.y >= cfg.ground_height:
            return

        pos.y = max(cfg.ground_height, cfg.minimum_height)

        if state.is_on_runway:
            state.speed = max(state.speed - cfg.runway_friction * dt, 0.0)
            state.angular_velocity.x *= cfg.ground_rate_damping
            state.angular_velocity.z *= cfg.ground_rate_damping

            if state.speed < cfg.ground_attitude_speed:
                # Settle toward the tail-dragger resting attitude
                state.angular_velocity.x += (
                    (cfg.ground_attitude - state.rotation.x) * cfg.ground_attitude_gain * dt
                )
        else:
            state.speed = max(state.speed - cfg.rough_ground_friction * dt, 0.0)

    def _smoothing_factor(self, dt: float) -> float:
        """Fraction of the remaining distance covered by a control input this frame."""
        if self.config.exact_smoothing:
            return 1.0 - math.exp(-self.config.control_smoothing * dt)
        # Capped so a long frame lands on the target instead of overshooting it
        return min(self.config.control_smoothing * dt, 1.0)

    def _update_control_inputs(self, controls: FlightControls, dt: float) -> None:
        """Move the smoothed control inputs toward the held keys."""
        state = self.state

        if controls.pitch_up:
            target_pitch = -1.0
        elif controls.pitch_down:
            target_pitch = 1.0
        else:
            target_pitch = 0.0

        if controls.right:
            target_roll = 1.0
        elif controls.left:
            target_roll = -1.0
        else:
            target_roll = 0.0

        if controls.yaw_right:
            target_yaw = 1.0
        elif controls.yaw_left:
            target_yaw = -1.0
        else:
            target_yaw = 0.0

        factor = self._smoothing_factor(dt)
        state.pitch_input += (target_pitch - state.pitch_input) * factor
        state.roll_input += (target_roll - state.roll_input) * factor
        state.yaw_input += (target_yaw - state.yaw_input) * factor

    def _update_trim(self, dt: float) -> None:
        """Let the trim follow the held attitude while controls are centred."""
        cfg = self.config
        state = self.state

        if abs(state.pitch_input) < cfg.trim_input_deadband and state.speed > cfg.trim_min_speed:
            state.pitch_trim += state.rotation.x * cfg.pitch_trim_rate * dt
            state.pitch_trim = clamp(state.pitch_trim, -cfg.pitch_trim_limit, cfg.pitch_trim_limit)

        if abs(state.roll_input) < cfg.trim_input_deadband and state.speed > cfg.trim_min_speed:
            state.roll_trim += state.rotation.z * cfg.roll_trim_rate * dt
            state.roll_trim = clamp(state.roll_trim, -cfg.roll_trim_limit, cfg.roll_trim_limit)

    def get_control_effectiveness(self) -> float:
        """Speed-derived scale for control and stability forces (0.1 to 1.0)."""
        cfg = self.config
        return clamp(self.state.speed / cfg.effectiveness_speed, cfg.effectiveness_floor, 1.0)

    def _update_attitude(self, dt: float) -> None:
        """Apply control torque, stability and damping, then integrate attitude."""
        cfg = self.config
        state = self.state
        rates = state.angular_velocity
        rotation = state.rotation

        effectiveness = self.get_control_effectiveness()

        if state.speed > cfg.min_control_speed:
            scale = cfg.control_sensitivity * effectiveness
            rates.x += state.pitch_input * scale * cfg.pitch_authority * dt
            rates.z += state.roll_input * scale * cfg.roll_authority * dt
            rates.y += state.yaw_input * scale * cfg.yaw_authority * dt

            # Return toward the trimmed attitude; yaw has no trim
            strength = effectiveness * cfg.stability_strength
            rates.x += -(rotation.x - state.pitch_trim) * strength * cfg.pitch_stability * dt
            rates.z += -(rotation.z - state.roll_trim) * strength * cfg.roll_stability * dt
            rates.y += -rotation.y * strength * cfg.yaw_stability * dt

        if cfg.exact_smoothing:
            damping = math.exp(-cfg.angular_damping * dt)
        else:
            damping = max(0.0, 1.0 - cfg.angular_damping * dt)
        rates.x *= damping
        rates.y *= damping
        rates.z *= damping

        rotation.x += rates.x * dt
        rotation.y += rates.y * dt
        rotation.z += rates.z * dt

        rotation.x = clamp(rotation.x, -cfg.pitch_limit, cfg.pitch_limit)
        rotation.z = clamp(rotation.z, -cfg.roll_limit, cfg.roll_limit)

    def _update_gear(self, controls: FlightControls) -> None:
        """Consume a gear toggle request."""
        self.state.gear_toggled = controls.landing_gear
        if controls.landing_gear:
            self.state.is_gear_down = not self.state.is_gear_down
            logger.info("Landing gear %s", "down" if self.state.is_gear_down else "up")

    def _translate(self, dt: float) -> None:
        """Move along the forward axis on X/Z and keep the aircraft in the world."""
        cfg = self.config
        state = self.state
        pos = state.position

        if cfg.time_scaled_translation:
            step = state.speed * dt * cfg.reference_frame_rate
        else:
            step = state.speed
        forward = FORWARD_AXIS.apply_euler(state.rotation.x, state.rotation.y, state.rotation.z)
        pos.x += forward.x * step
        pos.z += forward.z * step

        pos.x = wrap_coordinate(pos.x, cfg.world_half_extent)
        pos.z = wrap_coordinate(pos.z, cfg.world_half_extent)
        pos.y = min(pos.y, cfg.ceiling)

    def get_state(self) -> AircraftState:
        """Get current aircraft state.

        Returns:
            Reference to internal state (no copy).
        """
        return self.state

    def reset(self, initial_state: AircraftState | None = None) -> None:
        """Reset to a new state.

        Args:
            initial_state: New state, or None for the start-of-session state.
        """
        if initial_state is None:
            initial_state = AircraftState.initial(stall_speed=self.config.stall_speed)
        self.state = initial_state
        self._updates = 0
        logger.debug("Reset flight model to new state")

    def get_update_count(self) -> int:
        """Get number of updates performed."""
        return self._updates
