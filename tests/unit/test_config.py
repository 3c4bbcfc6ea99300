"""Tests for configuration loading and validation."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from assembly_trace.config.loader import (
    configure,
    get_settings,
    load_config,
    lock_settings,
    reset_settings,
    substitute_env_vars,
)
from assembly_trace.config.schema import DEFAULT_INTERNAL_PREFIX, LoggingConfig, TraceSettings
from assembly_trace.utils.errors import AssemblyTraceError


class TestSubstituteEnvVars:
    """Test environment variable substitution."""

    def test_substitute_single_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting a single environment variable."""
        monkeypatch.setenv("TEST_VAR", "test_value")
        assert substitute_env_vars("Value is ${TEST_VAR}") == "Value is test_value"

    def test_substitute_multiple_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting multiple environment variables."""
        monkeypatch.setenv("VAR1", "value1")
        monkeypatch.setenv("VAR2", "value2")
        assert substitute_env_vars("${VAR1} and ${VAR2}") == "value1 and value2"

    def test_missing_env_var_raises(self) -> None:
        """Test that missing environment variables raise ValueError."""
        os.environ.pop("MISSING", None)
        with pytest.raises(ValueError, match="Environment variable MISSING not found"):
            substitute_env_vars("Value is ${MISSING}")

    def test_no_substitution_needed(self) -> None:
        """Test text without environment variables passes through unchanged."""
        assert substitute_env_vars("plain text without vars") == "plain text without vars"


class TestTraceSettings:
    """Test TraceSettings validation."""

    def test_defaults(self) -> None:
        """Test capture defaults."""
        settings = TraceSettings()

        assert settings.full_stacktrace is False
        assert settings.internal_prefix == DEFAULT_INTERNAL_PREFIX
        assert settings.logging == LoggingConfig()

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("ASSEMBLY_TRACE_FULL_STACKTRACE", "true")
        monkeypatch.setenv("ASSEMBLY_TRACE_INTERNAL_PREFIX", "flowkit.core.")

        settings = TraceSettings()

        assert settings.full_stacktrace is True
        assert settings.internal_prefix == "flowkit.core."

    @pytest.mark.parametrize("prefix", ["flowkit.core", " flowkit.core.", "."])
    def test_invalid_prefix_rejected(self, prefix: str) -> None:
        """Test the prefix must be a dotted package prefix."""
        with pytest.raises(ValidationError):
            TraceSettings(internal_prefix=prefix)

    def test_invalid_log_level_rejected(self) -> None:
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            TraceSettings.model_validate({"logging": {"level": "LOUD"}})

    def test_frozen(self) -> None:
        """Test settings cannot change after construction."""
        settings = TraceSettings()

        with pytest.raises(ValidationError):
            settings.full_stacktrace = True  # type: ignore[misc]


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_load_valid_config(self, tmp_path: Path) -> None:
        """Test loading a complete configuration file."""
        path = tmp_path / "trace.yaml"
        path.write_text(
            "full_stacktrace: true\n"
            "internal_prefix: flowkit.core.\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  format: json\n"
        )

        settings = load_config(path)

        assert settings.full_stacktrace is True
        assert settings.internal_prefix == "flowkit.core."
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "json"

    def test_load_with_env_substitution(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test ${VAR} references are resolved before parsing."""
        monkeypatch.setenv("FLOW_PREFIX", "flowkit.core.")
        path = tmp_path / "trace.yaml"
        path.write_text("internal_prefix: ${FLOW_PREFIX}\n")

        assert load_config(path).internal_prefix == "flowkit.core."

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test an empty document means default settings."""
        path = tmp_path / "trace.yaml"
        path.write_text("")

        assert load_config(path).internal_prefix == DEFAULT_INTERNAL_PREFIX

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_config(tmp_path / "absent.yaml")

    def test_invalid_schema(self, tmp_path: Path) -> None:
        """Test schema violations raise ValidationError."""
        path = tmp_path / "trace.yaml"
        path.write_text("internal_prefix: no-dot\n")

        with pytest.raises(ValidationError, match="must end with"):
            load_config(path)


class TestProcessSettings:
    """Test get_settings and configure."""

    def test_read_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the environment is consulted only on first use."""
        first = get_settings()
        monkeypatch.setenv("ASSEMBLY_TRACE_FULL_STACKTRACE", "true")

        assert get_settings() is first
        assert get_settings().full_stacktrace is False

    def test_configure_replaces(self) -> None:
        """Test configure installs explicit settings."""
        settings = TraceSettings(internal_prefix="flowkit.core.")
        configure(settings)

        assert get_settings() is settings

    def test_configure_none_rereads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test resetting makes the next call read the environment."""
        get_settings()
        monkeypatch.setenv("ASSEMBLY_TRACE_FULL_STACKTRACE", "true")
        configure(None)

        assert get_settings().full_stacktrace is True

    def test_locked_settings_reject_configure(self) -> None:
        """Test pinned settings refuse replacement until reset."""
        pinned = lock_settings()

        with pytest.raises(AssemblyTraceError):
            configure(TraceSettings(internal_prefix="flowkit.core."))
        assert get_settings() is pinned

        reset_settings()
        settings = TraceSettings(internal_prefix="flowkit.core.")
        configure(settings)

        assert get_settings() is settings
