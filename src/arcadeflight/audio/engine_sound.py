"""Engine and wind sound parameters derived from the flight state.

The host audio driver runs four continuous oscillators. This module only
computes their frequency and gain each frame; it does not synthesise
sound. The curves are purely derived from the state and never feed back
into the physics.

Layers:
- engine: sawtooth, pitch and volume follow throttle
- propeller: square, lower pitch, follows throttle
- rumble: triangle, deep bass, follows throttle
- wind: sine, follows altitude and speed

Typical usage example:
    mixer = EngineSoundMixer()
    for name, osc in mixer.compute(model.get_state()).items():
        driver.set_oscillator(name, osc.frequency_hz, osc.gain)
"""

from dataclasses import dataclass

from arcadeflight.physics.flight_model.base import AircraftState


@dataclass(frozen=True)
class OscillatorSettings:
    """Target settings for one oscillator.

    Attributes:
        waveform: Oscillator shape ("sawtooth", "square", "triangle", "sine").
        frequency_hz: Frequency in Hz.
        gain: Linear output gain.
    """

    waveform: str
    frequency_hz: float
    gain: float


@dataclass(frozen=True)
class SoundLayer:
    """Linear throttle response of one engine layer.

    Attributes:
        waveform: Oscillator shape.
        base_frequency: Frequency at idle (Hz).
        frequency_range: Added frequency at full throttle (Hz).
        base_gain: Gain at idle.
        gain_range: Added gain at full throttle.
        startup_frequency: Frequency when the oscillator is first started.
        startup_gain: Gain when the oscillator is first started.
    """

    waveform: str
    base_frequency: float
    frequency_range: float
    base_gain: float
    gain_range: float
    startup_frequency: float
    startup_gain: float

    def at_throttle(self, throttle: float) -> OscillatorSettings:
        """Evaluate the layer at a throttle setting."""
        return OscillatorSettings(
            waveform=self.waveform,
            frequency_hz=self.base_frequency + throttle * self.frequency_range,
            gain=self.base_gain + throttle * self.gain_range,
        )


ENGINE_LAYER = SoundLayer("sawtooth", 120.0, 280.0, 0.03, 0.12, 120.0, 0.08)
PROPELLER_LAYER = SoundLayer("square", 30.0, 80.0, 0.02, 0.08, 40.0, 0.04)
RUMBLE_LAYER = SoundLayer("triangle", 15.0, 40.0, 0.02, 0.10, 25.0, 0.06)

WIND_WAVEFORM = "sine"
WIND_BASE_FREQUENCY = 600.0
WIND_FREQUENCY_RANGE = 800.0
WIND_GAIN_SCALE = 0.08
WIND_MAX_GAIN = 0.06
WIND_STARTUP_FREQUENCY = 800.0
WIND_STARTUP_GAIN = 0.02
WIND_ALTITUDE_SCALE = 50.0
WIND_SPEED_SCALE = 3.0


class EngineSoundMixer:
    """Maps aircraft state to oscillator settings.

    Examples:
        >>> mixer = EngineSoundMixer()
        >>> settings = mixer.compute(AircraftState(throttle=1.0))
        >>> settings["engine"].frequency_hz
        400.0
    """

    layers: dict[str, SoundLayer] = {
        "engine": ENGINE_LAYER,
        "propeller": PROPELLER_LAYER,
        "rumble": RUMBLE_LAYER,
    }

    @staticmethod
    def wind_intensity(state: AircraftState) -> float:
        """Wind intensity from altitude and speed, capped at 1.0."""
        altitude_term = state.get_altitude() / WIND_ALTITUDE_SCALE
        speed_term = state.speed / WIND_SPEED_SCALE
        return min((altitude_term + speed_term) / 2.0, 1.0)

    def compute(self, state: AircraftState) -> dict[str, OscillatorSettings]:
        """Compute all oscillator settings for the current frame.

        Args:
            state: Current aircraft state.

        Returns:
            Settings keyed by layer name ("engine", "propeller", "rumble", "wind").
        """
        settings = {name: layer.at_throttle(state.throttle) for name, layer in self.layers.items()}

        intensity = self.wind_intensity(state)
        settings["wind"] = OscillatorSettings(
            waveform=WIND_WAVEFORM,
            frequency_hz=WIND_BASE_FREQUENCY + intensity * WIND_FREQUENCY_RANGE,
            gain=min(intensity * WIND_GAIN_SCALE, WIND_MAX_GAIN),
        )
        return settings

    def idle_settings(self) -> dict[str, OscillatorSettings]:
        """Settings used when the oscillators are first started."""
        settings = {
            name: OscillatorSettings(layer.waveform, layer.startup_frequency, layer.startup_gain)
            for name, layer in self.layers.items()
        }
        settings["wind"] = OscillatorSettings(
            WIND_WAVEFORM, WIND_STARTUP_FREQUENCY, WIND_STARTUP_GAIN
        )
        return settings
