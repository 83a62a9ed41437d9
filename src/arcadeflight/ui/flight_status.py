"""On-screen flight status readout.

Builds the text shown in the status panel (position, altitude, speed,
throttle, gear, runway and stall state) and the control legend, and draws
both with pygame fonts.

Typical usage example:
    panel = FlightStatusPanel()
    panel.draw(screen, font, FlightStatus.from_state(model.get_state()))
"""

from dataclasses import dataclass

import pygame

from arcadeflight.physics.flight_model.base import AircraftState

# Speed readout scale (simulation units to displayed km/h)
SPEED_DISPLAY_SCALE = 100.0

HELP_LINES = [
    "Flight Controls:",
    "W/Up - Increase Throttle | S/Down - Decrease Throttle",
    "A/Left - Roll Left | D/Right - Roll Right",
    "R - Pitch Up | F - Pitch Down",
    "Z - Yaw Left | C - Yaw Right",
    "L - Toggle Landing Gear",
    "Camera Controls:",
    "Click & Drag - Look around",
    "Mouse Wheel - Zoom in/out",
]

TEXT_COLOR = (255, 255, 255)
STALL_COLOR = (239, 68, 68)
PANEL_COLOR = (0, 0, 0, 128)
LINE_SPACING = 4
PANEL_PADDING = 12


@dataclass(frozen=True)
class FlightStatus:
    """Snapshot of the values shown in the status panel."""

    x: float
    y: float
    z: float
    speed: float
    throttle: float
    is_gear_down: bool
    is_on_runway: bool
    is_stalling: bool

    @classmethod
    def from_state(cls, state: AircraftState) -> "FlightStatus":
        """Copy the displayed fields out of the aircraft state."""
        return cls(
            x=state.position.x,
            y=state.get_altitude(),
            z=state.position.z,
            speed=state.speed,
            throttle=state.throttle,
            is_gear_down=state.is_gear_down,
            is_on_runway=state.is_on_runway,
            is_stalling=state.is_stalling,
        )

    def status_lines(self) -> list[str]:
        """Format the readout lines."""
        return [
            f"X: {round(self.x)}",
            f"Y: {round(self.y)}",
            f"Z: {round(self.z)}",
            f"Altitude: {round(self.y)}m",
            f"Speed: {round(self.speed * SPEED_DISPLAY_SCALE)} km/h",
            f"Throttle: {round(self.throttle * 100)}%",
            f"Gear: {'Down' if self.is_gear_down else 'Up'}",
            f"State: {'On Runway' if self.is_on_runway else 'In Flight'}",
            f"Stall: {'YES!' if self.is_stalling else 'No'}",
        ]


class FlightStatusPanel:
    """Draws the status readout and control legend."""

    def __init__(self, show_help: bool = True) -> None:
        self.show_help = show_help

    def _draw_block(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        lines: list[str],
        origin: tuple[int, int],
        highlight: set[int] | None = None,
    ) -> None:
        highlight = highlight or set()
        rendered = [
            font.render(line, True, STALL_COLOR if i in highlight else TEXT_COLOR)
            for i, line in enumerate(lines)
        ]
        width = max((r.get_width() for r in rendered), default=0) + 2 * PANEL_PADDING
        height = sum(r.get_height() + LINE_SPACING for r in rendered) + 2 * PANEL_PADDING

        x, y = origin
        if x < 0:
            x = surface.get_width() + x - width

        background = pygame.Surface((width, height), pygame.SRCALPHA)
        background.fill(PANEL_COLOR)
        surface.blit(background, (x, y))

        cursor = y + PANEL_PADDING
        for r in rendered:
            surface.blit(r, (x + PANEL_PADDING, cursor))
            cursor += r.get_height() + LINE_SPACING

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, status: FlightStatus) -> None:
        """Draw the panels onto a surface.

        Args:
            surface: Target surface.
            font: Font used for all text.
            status: Values to display.
        """
        lines = status.status_lines()
        stall_line = {len(lines) - 1} if status.is_stalling else set()
        self._draw_block(surface, font, lines, (-16, 16), highlight=stall_line)

        if self.show_help:
            self._draw_block(surface, font, HELP_LINES, (16, 16))
