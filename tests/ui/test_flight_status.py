"""Tests for the flight status readout."""

import pygame
import pytest

from arcadeflight.physics.flight_model.base import AircraftState
from arcadeflight.physics.vectors import Vector3
from arcadeflight.ui.flight_status import FlightStatus, FlightStatusPanel


class TestFlightStatusLines:
    """Test status text formatting."""

    def test_initial_state(self) -> None:
        """Test the readout for the parked aircraft."""
        status = FlightStatus.from_state(AircraftState.initial())

        assert status.status_lines() == [
            "X: 0",
            "Y: 1",
            "Z: -50",
            "Altitude: 1m",
            "Speed: 0 km/h",
            "Throttle: 0%",
            "Gear: Down",
            "State: In Flight",
            "Stall: No",
        ]

    def test_flying_state(self) -> None:
        """Test speed and throttle scaling and the flag labels."""
        state = AircraftState(
            position=Vector3(120.4, 57.6, -3.2),
            speed=1.234,
            throttle=0.756,
            is_gear_down=False,
            is_on_runway=False,
            is_stalling=True,
        )

        lines = FlightStatus.from_state(state).status_lines()

        assert "Altitude: 58m" in lines
        assert "Speed: 123 km/h" in lines
        assert "Throttle: 76%" in lines
        assert "Gear: Up" in lines
        assert "Stall: YES!" in lines

    def test_on_runway_label(self) -> None:
        """Test the runway label."""
        state = AircraftState(is_on_runway=True)
        assert "State: On Runway" in FlightStatus.from_state(state).status_lines()

    def test_snapshot_is_independent(self) -> None:
        """Test the status does not track later state changes."""
        state = AircraftState.initial()
        status = FlightStatus.from_state(state)
        state.position.y = 100.0

        assert status.y == pytest.approx(0.8)


class TestFlightStatusPanel:
    """Test drawing the panel onto a surface."""

    @pytest.fixture
    def font(self) -> pygame.font.Font:
        """Create the default font (no window needed)."""
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, 14)

    def test_draw_writes_pixels(self, font: pygame.font.Font) -> None:
        """Test the status panel is drawn in the top-right corner."""
        surface = pygame.Surface((800, 600))
        surface.fill((0, 0, 0))

        status = FlightStatus.from_state(AircraftState(is_stalling=True))
        FlightStatusPanel(show_help=False).draw(surface, font, status)

        assert pygame.transform.average_color(surface, (500, 0, 300, 300))[:3] != (0, 0, 0)
        assert pygame.transform.average_color(surface, (0, 300, 800, 300))[:3] == (0, 0, 0)

    def test_help_legend(self, font: pygame.font.Font) -> None:
        """Test the legend is drawn on the left only when enabled."""
        with_help = pygame.Surface((800, 600))
        without_help = pygame.Surface((800, 600))
        status = FlightStatus.from_state(AircraftState.initial())

        FlightStatusPanel(show_help=True).draw(with_help, font, status)
        FlightStatusPanel(show_help=False).draw(without_help, font, status)

        legend_area = (0, 0, 300, 200)
        assert pygame.transform.average_color(with_help, legend_area)[:3] != (0, 0, 0)
        assert pygame.transform.average_color(without_help, legend_area)[:3] == (0, 0, 0)
