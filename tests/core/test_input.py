"""Tests for InputManager key and mouse handling."""

from unittest.mock import Mock

import pygame
import pytest

from arcadeflight.core.input import InputAction, InputConfig, InputManager
from arcadeflight.physics.flight_model.base import FlightControls
from arcadeflight.ui.chase_camera import ChaseCamera


def key_event(event_type: int, key: int) -> Mock:
    """Create a mock keyboard event."""
    event = Mock()
    event.type = event_type
    event.key = key
    return event


def press(key: int) -> Mock:
    return key_event(pygame.KEYDOWN, key)


def release(key: int) -> Mock:
    return key_event(pygame.KEYUP, key)


@pytest.fixture
def manager() -> InputManager:
    """Create input manager with default bindings."""
    return InputManager()


class TestHeldKeys:
    """Test held flight keys."""

    @pytest.mark.parametrize(
        "key,field_name",
        [
            (pygame.K_w, "throttle"),
            (pygame.K_UP, "throttle"),
            (pygame.K_s, "brake"),
            (pygame.K_DOWN, "brake"),
            (pygame.K_a, "left"),
            (pygame.K_LEFT, "left"),
            (pygame.K_d, "right"),
            (pygame.K_RIGHT, "right"),
            (pygame.K_r, "pitch_up"),
            (pygame.K_f, "pitch_down"),
            (pygame.K_z, "yaw_left"),
            (pygame.K_c, "yaw_right"),
        ],
    )
    def test_default_bindings(self, manager: InputManager, key: int, field_name: str) -> None:
        """Test each default key sets its control flag while held."""
        manager.process_events([press(key)])
        assert getattr(manager.get_controls(), field_name) is True

        manager.process_events([release(key)])
        assert getattr(manager.get_controls(), field_name) is False

    def test_held_key_persists_across_frames(self, manager: InputManager) -> None:
        """Test a held key stays set until released."""
        manager.process_events([press(pygame.K_w)])

        for _ in range(3):
            assert manager.get_controls().throttle is True

    def test_two_keys_for_one_action(self, manager: InputManager) -> None:
        """Test releasing one of two bound keys keeps the action held."""
        manager.process_events([press(pygame.K_w), press(pygame.K_UP), release(pygame.K_w)])

        assert manager.is_action_pressed(InputAction.THROTTLE_INCREASE)

    def test_unbound_key_ignored(self, manager: InputManager) -> None:
        """Test unbound keys produce no controls."""
        manager.process_events([press(pygame.K_q)])

        controls = manager.get_controls()
        assert controls == FlightControls()

    def test_release_all(self, manager: InputManager) -> None:
        """Test release_all clears held keys."""
        manager.process_events([press(pygame.K_a), press(pygame.K_r)])
        manager.release_all()

        controls = manager.get_controls()
        assert controls.left is False
        assert controls.pitch_up is False

    def test_custom_bindings(self) -> None:
        """Test a custom binding map replaces the defaults."""
        config = InputConfig(keyboard_bindings={pygame.K_SPACE: InputAction.THROTTLE_INCREASE})
        manager = InputManager(config)

        manager.process_events([press(pygame.K_SPACE), press(pygame.K_w)])

        assert manager.get_controls().throttle is True
        assert manager.is_action_pressed(InputAction.THROTTLE_INCREASE)
        manager.process_events([release(pygame.K_SPACE)])
        assert manager.get_controls().throttle is False


class TestGearToggle:
    """Test the one-shot landing gear command."""

    def test_gear_delivered_once(self, manager: InputManager) -> None:
        """Test a gear key press appears in exactly one snapshot."""
        manager.process_events([press(pygame.K_l)])

        assert manager.get_controls().landing_gear is True
        assert manager.get_controls().landing_gear is False

    def test_held_gear_key_does_not_repeat(self, manager: InputManager) -> None:
        """Test key repeat of the gear key does not toggle again."""
        manager.process_events([press(pygame.K_l)])
        manager.get_controls()

        manager.process_events([press(pygame.K_l)])
        assert manager.get_controls().landing_gear is False

    def test_gear_after_release(self, manager: InputManager) -> None:
        """Test a second press after release toggles again."""
        manager.process_events([press(pygame.K_l)])
        manager.get_controls()
        manager.process_events([release(pygame.K_l), press(pygame.K_l)])

        assert manager.get_controls().landing_gear is True


class TestQuit:
    """Test quit handling."""

    def test_escape_requests_quit(self, manager: InputManager) -> None:
        """Test Escape sets quit_requested."""
        manager.process_events([press(pygame.K_ESCAPE)])
        assert manager.quit_requested is True

    def test_window_close_requests_quit(self, manager: InputManager) -> None:
        """Test the window close event sets quit_requested."""
        event = Mock()
        event.type = pygame.QUIT
        manager.process_events([event])
        assert manager.quit_requested is True


class TestMouseCamera:
    """Test mouse control of the chase camera."""

    @pytest.fixture
    def camera(self) -> ChaseCamera:
        """Create chase camera."""
        return ChaseCamera()

    @pytest.fixture
    def camera_manager(self, camera: ChaseCamera) -> InputManager:
        """Create input manager driving the camera."""
        return InputManager(camera=camera)

    @staticmethod
    def _event(event_type: int, **attrs: object) -> Mock:
        event = Mock()
        event.type = event_type
        for name, value in attrs.items():
            setattr(event, name, value)
        return event

    def test_drag_orbits(self, camera_manager: InputManager, camera: ChaseCamera) -> None:
        """Test mouse motion while a button is held orbits the camera."""
        camera_manager.process_events(
            [
                self._event(pygame.MOUSEBUTTONDOWN, button=1),
                self._event(pygame.MOUSEMOTION, rel=(20, -10)),
            ]
        )

        assert camera.orbit_x == pytest.approx(0.2)
        assert camera.orbit_y == pytest.approx(-0.1)

    def test_motion_without_drag_ignored(
        self, camera_manager: InputManager, camera: ChaseCamera
    ) -> None:
        """Test mouse motion without a button held does nothing."""
        camera_manager.process_events(
            [
                self._event(pygame.MOUSEBUTTONDOWN, button=1),
                self._event(pygame.MOUSEBUTTONUP, button=1),
                self._event(pygame.MOUSEMOTION, rel=(50, 50)),
            ]
        )

        assert camera.orbit_x == 0.0
        assert camera.orbit_y == 0.0

    def test_wheel_zooms(self, camera_manager: InputManager, camera: ChaseCamera) -> None:
        """Test wheel up moves the camera closer and wheel down farther."""
        camera_manager.process_events([self._event(pygame.MOUSEWHEEL, y=2)])
        assert camera.distance == pytest.approx(13.0)

        camera_manager.process_events([self._event(pygame.MOUSEWHEEL, y=-5)])
        assert camera.distance == pytest.approx(18.0)

    def test_mouse_without_camera(self, manager: InputManager) -> None:
        """Test mouse events are harmless without a camera."""
        manager.process_events(
            [
                self._event(pygame.MOUSEBUTTONDOWN, button=1),
                self._event(pygame.MOUSEMOTION, rel=(5, 5)),
                self._event(pygame.MOUSEWHEEL, y=1),
            ]
        )
        assert manager.quit_requested is False

    def test_wheel_buttons_do_not_end_drag(
        self, camera_manager: InputManager, camera: ChaseCamera
    ) -> None:
        """Test wheel notches reported as buttons 4/5 keep a drag going."""
        camera_manager.process_events(
            [
                self._event(pygame.MOUSEBUTTONDOWN, button=1),
                self._event(pygame.MOUSEBUTTONDOWN, button=4),
                self._event(pygame.MOUSEBUTTONUP, button=4),
                self._event(pygame.MOUSEMOTION, rel=(10, 0)),
            ]
        )

        assert camera.orbit_x == pytest.approx(0.1)

    def test_wheel_buttons_do_not_start_drag(
        self, camera_manager: InputManager, camera: ChaseCamera
    ) -> None:
        """Test a wheel notch alone does not start a drag."""
        camera_manager.process_events(
            [
                self._event(pygame.MOUSEBUTTONDOWN, button=5),
                self._event(pygame.MOUSEMOTION, rel=(10, 10)),
            ]
        )

        assert camera.orbit_x == 0.0
