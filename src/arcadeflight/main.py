"""ArcadeFlight - arcade flight simulator.

Main entry point for the application. Initializes Pygame, creates the game
window, wires input, physics, camera, sound and status display together, and
runs the main loop. A headless mode flies a scripted takeoff without a
window, which is useful for checking a flight model configuration.

Typical usage:
    python -m arcadeflight.main
    python -m arcadeflight.main --config config/aircraft/trainer.yaml
    python -m arcadeflight.main --headless --duration 30
"""

import argparse
import math
import sys

import pygame

from arcadeflight.audio.engine_sound import EngineSoundMixer, OscillatorSettings
from arcadeflight.core.input import InputManager
from arcadeflight.core.logging_system import get_logger, initialize_logging
from arcadeflight.core.resource_path import get_config_path
from arcadeflight.physics.flight_model.arcade import ArcadeFlightModel
from arcadeflight.physics.flight_model.base import AircraftState, FlightControls
from arcadeflight.physics.flight_model.config import FlightModelConfig
from arcadeflight.ui.aircraft_view import AircraftView
from arcadeflight.ui.chase_camera import ChaseCamera
from arcadeflight.ui.flight_status import FlightStatus, FlightStatusPanel
from arcadeflight.version import get_version

logger = get_logger(__name__)

WINDOW_SIZE = (800, 600)
TARGET_FPS = 60
DEFAULT_DT = 0.016

MAP_BACKGROUND = (34, 85, 34)
RUNWAY_COLOR = (64, 64, 64)
AIRCRAFT_COLOR = (255, 255, 255)
CAMERA_COLOR = (255, 200, 0)
TEXT_COLOR = (255, 255, 255)
CAMERA_AIM_LENGTH = 12

# Altitude at which the scripted takeoff retracts the gear
GEAR_UP_ALTITUDE = 20.0


def load_flight_model_config(path: str | None) -> FlightModelConfig:
    """Load the flight model config, falling back to the bundled trainer file.

    Args:
        path: Explicit YAML path, or None.

    Returns:
        Flight model configuration (defaults when no file is available).
    """
    if path is not None:
        return FlightModelConfig.from_yaml(path)

    default_path = get_config_path("aircraft/trainer.yaml")
    if default_path.exists():
        return FlightModelConfig.from_yaml(default_path)

    logger.warning("No aircraft config found, using built-in defaults")
    return FlightModelConfig()


def audio_readout(settings: dict[str, OscillatorSettings], view: AircraftView) -> str:
    """One-line readout of the oscillator targets and heading.

    Args:
        settings: Oscillator settings keyed by layer name.
        view: Aircraft view holding the current pose.

    Returns:
        Readout text.
    """
    engine = settings["engine"]
    wind = settings["wind"]
    return (
        f"HDG {round(view.heading_degrees()) % 360:03d} | "
        f"Engine {engine.frequency_hz:.0f} Hz x{engine.gain:.2f} | "
        f"Wind {wind.frequency_hz:.0f} Hz x{wind.gain:.2f}"
    )


class ArcadeFlight:
    """Main application class.

    Manages initialization, the frame loop and shutdown.
    """

    def __init__(self, config: FlightModelConfig) -> None:
        """Initialize the application.

        Args:
            config: Flight model configuration.
        """
        pygame.init()
        pygame.display.set_caption("ArcadeFlight")

        self.screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.model = ArcadeFlightModel(config)
        self.camera = ChaseCamera()
        self.input_manager = InputManager(camera=self.camera)
        self.sound_mixer = EngineSoundMixer()
        self.view = AircraftView()
        self.status_panel = FlightStatusPanel()

        self.font = pygame.font.SysFont("monospace", 14)
        self.sound_settings = self.sound_mixer.idle_settings()

        logger.info("ArcadeFlight %s initialized", get_version())

    def run(self) -> None:
        """Run the main loop until the window is closed or Escape is pressed."""
        while self.running:
            dt = self.clock.tick(TARGET_FPS) / 1000.0

            self.input_manager.process_events(pygame.event.get())
            if self.input_manager.quit_requested:
                self.running = False
                break

            state = self.model.advance(self.input_manager.get_controls(), dt)
            self.view.update(state)
            self.sound_settings = self.sound_mixer.compute(state)

            self._render()

        self.shutdown()

    def _world_to_screen(self, x: float, z: float) -> tuple[int, int]:
        width, height = self.screen.get_size()
        extent = self.model.config.world_half_extent
        sx = (x + extent) / (2.0 * extent) * width
        sy = (1.0 - (z + extent) / (2.0 * extent)) * height
        return int(sx), int(sy)

    def _render(self) -> None:
        """Draw the top-down map, the status panel and the audio readout."""
        cfg = self.model.config
        state = self.model.get_state()
        pose = self.view.pose

        self.screen.fill(MAP_BACKGROUND)

        left, top = self._world_to_screen(-cfg.runway_half_width, cfg.runway_half_length)
        right, bottom = self._world_to_screen(cfg.runway_half_width, -cfg.runway_half_length)
        pygame.draw.rect(self.screen, RUNWAY_COLOR, (left, top, right - left, bottom - top))

        # Aircraft as a heading triangle
        cx, cy = self._world_to_screen(pose.position.x, pose.position.z)
        size = 10
        points = []
        for angle, length in ((0.0, size), (2.5, size * 0.6), (-2.5, size * 0.6)):
            heading = pose.yaw + angle
            points.append((cx + math.sin(heading) * length, cy - math.cos(heading) * length))
        pygame.draw.polygon(self.screen, AIRCRAFT_COLOR, points)

        # Camera position with a short line along its aim
        camera_pose = self.camera.compute(state)
        camera_x, camera_y = self._world_to_screen(camera_pose.position.x, camera_pose.position.z)
        aim = camera_pose.look_at - camera_pose.position
        aim_length = math.hypot(aim.x, aim.z)
        if aim_length > 0.0:
            end = (
                camera_x + aim.x / aim_length * CAMERA_AIM_LENGTH,
                camera_y - aim.z / aim_length * CAMERA_AIM_LENGTH,
            )
            pygame.draw.line(self.screen, CAMERA_COLOR, (camera_x, camera_y), end)
        pygame.draw.circle(self.screen, CAMERA_COLOR, (camera_x, camera_y), 3)

        self.status_panel.draw(self.screen, self.font, FlightStatus.from_state(state))

        readout = self.font.render(audio_readout(self.sound_settings, self.view), True, TEXT_COLOR)
        self.screen.blit(readout, (16, self.screen.get_height() - readout.get_height() - 16))
        pygame.display.flip()

    def shutdown(self) -> None:
        """Release pygame resources."""
        logger.info("ArcadeFlight shutting down")
        pygame.quit()


def run_headless(config: FlightModelConfig, duration: float, dt: float) -> AircraftState:
    """Fly a scripted takeoff without a window.

    Holds full throttle, retracts the gear once above ``GEAR_UP_ALTITUDE``
    and logs the status line once per simulated second.

    Args:
        config: Flight model configuration.
        duration: Simulated time in seconds.
        dt: Time step in seconds.

    Returns:
        Final aircraft state.
    """
    model = ArcadeFlightModel(config)
    gear_retracted = False
    steps = max(0, int(round(duration / dt))) if dt > 0 else 0
    log_every = max(1, int(round(1.0 / dt))) if dt > 0 else 1

    state = model.get_state()
    for step in range(steps):
        retract = not gear_retracted and state.position.y > GEAR_UP_ALTITUDE
        state = model.advance(FlightControls(throttle=True, landing_gear=retract), dt)
        gear_retracted = gear_retracted or retract

        if (step + 1) % log_every == 0:
            status = " | ".join(FlightStatus.from_state(state).status_lines())
            logger.info("t=%.1fs %s", (step + 1) * dt, status)

    return state


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(description="ArcadeFlight - arcade flight simulator")
    parser.add_argument("--config", help="Flight model YAML file")
    parser.add_argument("--logging-config", help="Logging dictConfig YAML file")
    parser.add_argument("--log-level", help="Override log level (e.g. DEBUG)")
    parser.add_argument(
        "--headless", action="store_true", help="Fly a scripted takeoff without a window"
    )
    parser.add_argument(
        "--duration", type=float, default=30.0, help="Headless simulated time in seconds"
    )
    parser.add_argument("--dt", type=float, default=DEFAULT_DT, help="Headless time step")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code.
    """
    args = parse_args(argv)

    logging_config = args.logging_config
    if logging_config is None and get_config_path("logging.yaml").exists():
        logging_config = str(get_config_path("logging.yaml"))
    try:
        initialize_logging(logging_config, level=args.log_level)
    except (FileNotFoundError, ValueError) as e:
        print(f"Failed to initialize logging: {e}", file=sys.stderr)
        return 1

    try:
        config = load_flight_model_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Invalid flight model config: %s", e)
        return 1

    if args.headless:
        state = run_headless(config, args.duration, args.dt)
        logger.info("Headless run finished at altitude %.1f", state.position.y)
        return 0

    app = ArcadeFlight(config)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
