"""Tests for FlightModelConfig loading and validation."""

from pathlib import Path

import pytest

from arcadeflight.physics.flight_model.config import FlightModelConfig


class TestFlightModelConfigDefaults:
    """Test default constants."""

    def test_reference_defaults(self) -> None:
        """Test a few defaults that define the flight feel."""
        config = FlightModelConfig()

        assert config.max_speed == 3.5
        assert config.stall_speed == 0.3
        assert config.control_smoothing == 15.0
        assert config.angular_damping == 2.8
        assert config.world_half_extent == 800.0
        assert config.ceiling == 200.0

    def test_strengthenings_off_by_default(self) -> None:
        """Test optional behaviours are disabled by default."""
        config = FlightModelConfig()

        assert config.exact_smoothing is False
        assert config.time_scaled_translation is False
        assert config.max_dt is None

    def test_frozen(self) -> None:
        """Test the config cannot be modified after creation."""
        config = FlightModelConfig()
        with pytest.raises(AttributeError):
            config.max_speed = 10.0  # type: ignore[misc]


class TestFromDict:
    """Test FlightModelConfig.from_dict()."""

    def test_overrides_and_defaults(self) -> None:
        """Test given keys override and missing keys keep defaults."""
        config = FlightModelConfig.from_dict({"max_speed": 4, "exact_smoothing": True})

        assert config.max_speed == 4.0
        assert isinstance(config.max_speed, float)
        assert config.exact_smoothing is True
        assert config.stall_speed == 0.3

    def test_unknown_key(self) -> None:
        """Test unknown keys are rejected and named."""
        with pytest.raises(ValueError, match="engine_count"):
            FlightModelConfig.from_dict({"engine_count": 2})

    def test_non_numeric_value(self) -> None:
        """Test numeric parameters reject strings."""
        with pytest.raises(ValueError, match="max_speed must be a number"):
            FlightModelConfig.from_dict({"max_speed": "fast"})

    def test_bool_for_numeric(self) -> None:
        """Test numeric parameters reject booleans."""
        with pytest.raises(ValueError, match="gravity must be a number"):
            FlightModelConfig.from_dict({"gravity": True})

    def test_non_bool_flag(self) -> None:
        """Test boolean parameters reject other types."""
        with pytest.raises(ValueError, match="exact_smoothing must be a boolean"):
            FlightModelConfig.from_dict({"exact_smoothing": 1})

    def test_max_dt(self) -> None:
        """Test max_dt accepts a number or None."""
        assert FlightModelConfig.from_dict({"max_dt": 0.1}).max_dt == 0.1
        assert FlightModelConfig.from_dict({"max_dt": None}).max_dt is None

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_number(self, value: float) -> None:
        """Test NaN and infinite numbers are rejected."""
        with pytest.raises(ValueError, match="max_speed must be finite"):
            FlightModelConfig.from_dict({"max_speed": value})

    def test_non_string_unknown_key(self) -> None:
        """Test unknown non-string keys are reported as ValueError."""
        with pytest.raises(ValueError, match="Unknown flight model parameter"):
            FlightModelConfig.from_dict({1: 2.0})

    def test_to_dict_round_trip(self) -> None:
        """Test to_dict output is accepted by from_dict."""
        config = FlightModelConfig(max_speed=5.0, max_dt=0.05)
        assert FlightModelConfig.from_dict(config.to_dict()) == config


class TestFromYaml:
    """Test FlightModelConfig.from_yaml()."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            FlightModelConfig.from_yaml(tmp_path / "missing.yaml")

    def test_top_level_parameters(self, tmp_path: Path) -> None:
        """Test parameters at the top level of the document."""
        path = tmp_path / "aircraft.yaml"
        path.write_text("max_speed: 4.5\nstall_speed: 0.35\n", encoding="utf-8")

        config = FlightModelConfig.from_yaml(path)

        assert config.max_speed == 4.5
        assert config.stall_speed == 0.35

    def test_nested_flight_model_section(self, tmp_path: Path) -> None:
        """Test parameters under a flight_model key."""
        path = tmp_path / "aircraft.yaml"
        path.write_text("flight_model:\n  time_scaled_translation: true\n", encoding="utf-8")

        config = FlightModelConfig.from_yaml(str(path))

        assert config.time_scaled_translation is True

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file gives the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert FlightModelConfig.from_yaml(path) == FlightModelConfig()

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test a YAML list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must be a mapping"):
            FlightModelConfig.from_yaml(path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Test a YAML syntax error is reported as ValueError."""
        path = tmp_path / "broken.yaml"
        path.write_text("flight_model: {max_speed: [1,\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            FlightModelConfig.from_yaml(path)

    def test_flight_model_section_not_mapping(self, tmp_path: Path) -> None:
        """Test a list under flight_model is rejected."""
        path = tmp_path / "list_section.yaml"
        path.write_text("flight_model: [1, 2]\n", encoding="utf-8")

        with pytest.raises(ValueError, match="flight_model section must be a mapping"):
            FlightModelConfig.from_yaml(path)

    def test_nan_in_file(self, tmp_path: Path) -> None:
        """Test a YAML .nan value is rejected."""
        path = tmp_path / "nan.yaml"
        path.write_text("flight_model:\n  max_speed: .nan\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must be finite"):
            FlightModelConfig.from_yaml(path)

    def test_bundled_trainer_config(self) -> None:
        """Test the bundled trainer file loads and matches the defaults."""
        path = Path(__file__).parents[3] / "config" / "aircraft" / "trainer.yaml"

        config = FlightModelConfig.from_yaml(path)

        assert config == FlightModelConfig()
