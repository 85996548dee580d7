"""Tests for AppConfig and its JSON persistence."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tuxkbd.exceptions import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from tuxkbd.models import DEFAULT_DEVICE_ROOT, AppConfig, FailurePolicy
from tuxkbd.utils import PydanticPersistence


class TestAppConfig:
    """Test AppConfig defaults and validation."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default configuration values."""
        config = AppConfig()

        assert config.device_root == DEFAULT_DEVICE_ROOT
        assert config.failure_policy is FailurePolicy.FAIL_FAST
        assert config.operation_timeout is None

    @pytest.mark.unit
    def test_timeout_must_be_positive(self):
        """Test that a zero timeout fails validation."""
        with pytest.raises(ValidationError):
            AppConfig(operation_timeout=0)

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        """Test that a saved config loads back unchanged."""
        path = tmp_path / "config.json"
        config = AppConfig(
            device_root=tmp_path / "kbd",
            failure_policy=FailurePolicy.COLLECT_ALL,
            operation_timeout=1.5,
        )

        config.save(path)
        loaded = AppConfig.load_or_default(path)

        assert loaded == config

    @pytest.mark.unit
    def test_saved_file_is_plain_json(self, tmp_path: Path):
        """Test the JSON layout of a saved config."""
        path = tmp_path / "config.json"
        AppConfig(device_root=Path("/tmp/kbd")).save(path)

        data = json.loads(path.read_text())

        assert data == {
            "device_root": "/tmp/kbd",
            "failure_policy": "fail_fast",
            "operation_timeout": None,
        }

    @pytest.mark.unit
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        """Test that a missing file yields defaults without creating it."""
        path = tmp_path / "missing.json"

        config = AppConfig.load_or_default(path)

        assert config == AppConfig()
        assert not path.exists()

    @pytest.mark.unit
    def test_invalid_policy(self, tmp_path: Path):
        """Test the hint for an unknown failure policy."""
        path = tmp_path / "config.json"
        path.write_text('{"failure_policy": "sometimes"}')

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.field == "failure_policy"
        assert "fail_fast" in exc_info.value.recovery_hint

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path: Path):
        """Test that malformed JSON raises ConfigFileInvalidError."""
        path = tmp_path / "config.json"
        path.write_text("{ invalid json }")

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(path)

    @pytest.mark.unit
    def test_empty_file(self, tmp_path: Path):
        """Test that a blank file is reported as empty."""
        path = tmp_path / "config.json"
        path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.user_message == "Configuration file is empty"


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    @pytest.mark.unit
    def test_save_creates_backup(self, tmp_path: Path):
        """Test that overwriting keeps the previous file as .bak."""
        path = tmp_path / "config.json"
        PydanticPersistence.save_json(AppConfig(operation_timeout=1.0), path, backup=False)

        PydanticPersistence.save_json(AppConfig(operation_timeout=2.0), path, backup=True)

        backup = PydanticPersistence.load_json(path.with_suffix(".json.bak"), AppConfig)
        current = PydanticPersistence.load_json(path, AppConfig)
        assert backup.operation_timeout == 1.0
        assert current.operation_timeout == 2.0

    @pytest.mark.unit
    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup=False skips the .bak file."""
        path = tmp_path / "config.json"
        PydanticPersistence.save_json(AppConfig(), path, backup=False)
        PydanticPersistence.save_json(AppConfig(), path, backup=False)

        assert not path.with_suffix(".json.bak").exists()

    @pytest.mark.unit
    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        """Test that no .tmp file is left after saving."""
        path = tmp_path / "nested" / "config.json"

        PydanticPersistence.save_json(AppConfig(), path)

        assert path.exists()
        assert not path.with_suffix(".json.tmp").exists()

    @pytest.mark.unit
    def test_load_missing_file_raises(self, tmp_path: Path):
        """Test that load_json raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", AppConfig)

    @pytest.mark.unit
    def test_validate_json(self, tmp_path: Path):
        """Test validate_json on a good and a bad file."""
        good = tmp_path / "good.json"
        bad = tmp_path / "bad.json"
        AppConfig().save(good)
        bad.write_text('{"operation_timeout": -1}')

        assert PydanticPersistence.validate_json(good, AppConfig) == (True, None)

        is_valid, error = PydanticPersistence.validate_json(bad, AppConfig)
        assert is_valid is False
        assert "operation_timeout" in error

    @pytest.mark.unit
    def test_configuration_errors_share_a_base(self, tmp_path: Path):
        """Test that parse errors are ConfigurationErrors."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2")

        with pytest.raises(ConfigurationError):
            PydanticPersistence.load_json(path, AppConfig)
