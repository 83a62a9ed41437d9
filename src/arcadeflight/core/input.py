"""Keyboard and mouse input for the flight model.

This module turns pygame events into :class:`FlightControls` snapshots and
chase-camera commands. Flight keys are tracked as held flags; the landing
gear key is a one-shot command that is handed out exactly once.

Typical usage example:
    from arcadeflight.core.input import InputManager

    input_manager = InputManager(camera=chase_camera)

    # In game loop
    input_manager.process_events(pygame.event.get())
    controls = input_manager.get_controls()
    model.advance(controls, dt)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pygame  # pylint: disable=no-member

from arcadeflight.core.logging_system import get_logger
from arcadeflight.physics.flight_model.base import FlightControls
from arcadeflight.ui.chase_camera import ChaseCamera

logger = get_logger(__name__)

# Camera zoom per mouse wheel notch (wheel up moves the camera closer)
WHEEL_ZOOM_STEP = 1.0

# Left, middle and right buttons; 4 and 5 are wheel notches
DRAG_BUTTONS = (1, 2, 3)


class InputAction(Enum):
    """Input actions that can be bound to keys."""

    THROTTLE_INCREASE = "throttle_increase"
    THROTTLE_DECREASE = "throttle_decrease"
    ROLL_LEFT = "roll_left"
    ROLL_RIGHT = "roll_right"
    PITCH_UP = "pitch_up"
    PITCH_DOWN = "pitch_down"
    YAW_LEFT = "yaw_left"
    YAW_RIGHT = "yaw_right"
    GEAR_TOGGLE = "gear_toggle"
    QUIT = "quit"


# Held actions and the FlightControls field each one drives
HELD_ACTION_FIELDS: dict[InputAction, str] = {
    InputAction.THROTTLE_INCREASE: "throttle",
    InputAction.THROTTLE_DECREASE: "brake",
    InputAction.ROLL_LEFT: "left",
    InputAction.ROLL_RIGHT: "right",
    InputAction.PITCH_UP: "pitch_up",
    InputAction.PITCH_DOWN: "pitch_down",
    InputAction.YAW_LEFT: "yaw_left",
    InputAction.YAW_RIGHT: "yaw_right",
}


@dataclass
class InputConfig:
    """Configuration for the input system.

    Attributes:
        keyboard_bindings: Map of pygame key constants to InputAction.
        mouse_sensitivity: Multiplier applied to mouse drag movement.
    """

    keyboard_bindings: dict[int, InputAction] = field(default_factory=dict)
    mouse_sensitivity: float = 1.0

    def __post_init__(self) -> None:
        """Initialize default key bindings if not provided."""
        if not self.keyboard_bindings:
            self.keyboard_bindings = self._get_default_bindings()

    def _get_default_bindings(self) -> dict[int, InputAction]:
        """Get default keyboard bindings.

        Returns:
            Dictionary mapping pygame keys to input actions.
        """
        return {
            pygame.K_w: InputAction.THROTTLE_INCREASE,
            pygame.K_UP: InputAction.THROTTLE_INCREASE,
            pygame.K_s: InputAction.THROTTLE_DECREASE,
            pygame.K_DOWN: InputAction.THROTTLE_DECREASE,
            pygame.K_a: InputAction.ROLL_LEFT,
            pygame.K_LEFT: InputAction.ROLL_LEFT,
            pygame.K_d: InputAction.ROLL_RIGHT,
            pygame.K_RIGHT: InputAction.ROLL_RIGHT,
            pygame.K_r: InputAction.PITCH_UP,
            pygame.K_f: InputAction.PITCH_DOWN,
            pygame.K_z: InputAction.YAW_LEFT,
            pygame.K_c: InputAction.YAW_RIGHT,
            pygame.K_l: InputAction.GEAR_TOGGLE,
            pygame.K_ESCAPE: InputAction.QUIT,
        }


class InputManager:
    """Tracks keyboard/mouse state and produces flight controls.

    Examples:
        >>> manager = InputManager()
        >>> manager.process_events(pygame_events)
        >>> controls = manager.get_controls()
        >>> print(f"Throttle held: {controls.throttle}")
    """

    def __init__(
        self, config: InputConfig | None = None, camera: ChaseCamera | None = None
    ) -> None:
        """Initialize input manager.

        Args:
            config: Input configuration (uses defaults if None).
            camera: Chase camera driven by the mouse (optional).
        """
        self.config = config if config is not None else InputConfig()
        self.camera = camera

        self._keys_pressed: set[int] = set()
        self._gear_toggle_pending = False
        self._dragging = False
        self.quit_requested = False

        logger.info(
            "Input manager initialized with %d key bindings", len(self.config.keyboard_bindings)
        )

    def process_events(self, events: list[Any]) -> None:
        """Process pygame events.

        Args:
            events: List of pygame events from the event queue.
        """
        for event in events:
            if event.type == pygame.KEYDOWN:
                self._handle_key_down(event.key)
            elif event.type == pygame.KEYUP:
                self._handle_key_up(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button in DRAG_BUTTONS:
                    self._dragging = True
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button in DRAG_BUTTONS:
                    self._dragging = False
            elif event.type == pygame.MOUSEMOTION:
                if self._dragging and self.camera is not None:
                    dx, dy = event.rel
                    sensitivity = self.config.mouse_sensitivity
                    self.camera.orbit(dx * sensitivity, dy * sensitivity)
            elif event.type == pygame.MOUSEWHEEL:
                if self.camera is not None:
                    self.camera.zoom(-event.y * WHEEL_ZOOM_STEP)
            elif event.type == pygame.QUIT:
                self.quit_requested = True

    def _handle_key_down(self, key: int) -> None:
        """Handle key press event.

        Args:
            key: Pygame key constant.
        """
        is_repeat = key in self._keys_pressed
        self._keys_pressed.add(key)

        action = self.config.keyboard_bindings.get(key)
        if action is None or is_repeat:
            return

        logger.debug("Key pressed: %d -> %s", key, action.value)

        if action == InputAction.GEAR_TOGGLE:
            self._gear_toggle_pending = True
        elif action == InputAction.QUIT:
            self.quit_requested = True

    def _handle_key_up(self, key: int) -> None:
        """Handle key release event.

        Args:
            key: Pygame key constant.
        """
        self._keys_pressed.discard(key)

    def is_action_pressed(self, action: InputAction) -> bool:
        """Check if an action is currently pressed.

        Args:
            action: Action to check.

        Returns:
            True if any key bound to the action is held.
        """
        for key, bound_action in self.config.keyboard_bindings.items():
            if bound_action == action and key in self._keys_pressed:
                return True
        return False

    def get_controls(self) -> FlightControls:
        """Build the controls for this frame.

        The pending gear toggle is consumed: it appears in exactly one
        returned snapshot.

        Returns:
            Control flags snapshot.
        """
        held = {name: self.is_action_pressed(action) for action, name in HELD_ACTION_FIELDS.items()}
        controls = FlightControls(landing_gear=self._gear_toggle_pending, **held)
        self._gear_toggle_pending = False
        return controls

    def release_all(self) -> None:
        """Forget all held keys (e.g. when the window loses focus)."""
        self._keys_pressed.clear()
        self._dragging = False
