"""Tests for configuration loading."""

import pytest
import yaml

from gcpctl_core.config import Config, _deep_merge


class TestConfigDefaults:
    def test_defaults(self, config_dir):
        config = Config(config_dir=config_dir)

        assert config.gcloud_binary == "gcloud"
        assert config.gcloud_timeout_seconds is None
        assert config.project_limit is None
        assert config.keybinding == "C-c g"
        assert config.enable_on_start is True

    def test_no_file_written_on_load(self, config_dir):
        Config(config_dir=config_dir)

        assert not (config_dir / "config.yaml").exists()


class TestConfigFile:
    """Test YAML file loading and saving."""

    def test_file_merges_over_defaults(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text(yaml.dump({"gcloud": {"timeout_seconds": 15}}))

        config = Config(config_dir=config_dir)

        assert config.gcloud_timeout_seconds == 15.0
        assert config.gcloud_binary == "gcloud"

    def test_set_persists(self, config_dir):
        config = Config(config_dir=config_dir)
        config.set("projects.limit", 25)

        reloaded = Config(config_dir=config_dir)

        assert reloaded.project_limit == 25

    def test_get_missing_key(self, config_dir):
        config = Config(config_dir=config_dir)

        assert config.get("nope.nothing", "fallback") == "fallback"


class TestConfigEnvironment:
    """Test environment overrides."""

    def test_env_overrides(self, config_dir, monkeypatch):
        monkeypatch.setenv("GCPCTL_GCLOUD", "/opt/sdk/bin/gcloud")
        monkeypatch.setenv("GCPCTL_PROJECT_LIMIT", "10")
        monkeypatch.setenv("GCPCTL_KEYBINDING", "C-c p")

        config = Config(config_dir=config_dir)

        assert config.gcloud_binary == "/opt/sdk/bin/gcloud"
        assert config.project_limit == 10
        assert config.keybinding == "C-c p"

    @pytest.mark.parametrize("raw", ["0", "-3", "ten"])
    def test_invalid_env_limit(self, config_dir, monkeypatch, raw):
        """Test a bad limit loads but is reported when it is used."""
        monkeypatch.setenv("GCPCTL_PROJECT_LIMIT", raw)

        config = Config(config_dir=config_dir)

        with pytest.raises(ValueError, match="projects.limit must be a positive integer"):
            config.project_limit

    @pytest.mark.parametrize("value", [0, True, "abc"])
    def test_invalid_file_limit(self, config_dir, value):
        config = Config(config_dir=config_dir)
        config.set("projects.limit", value)

        with pytest.raises(ValueError, match="positive integer"):
            Config(config_dir=config_dir).project_limit

    def test_env_overrides_non_mapping_sections(self, config_dir, monkeypatch):
        """Test env overrides still apply when a file section is null or a scalar."""
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("gcloud: null\nprojects: 5\nmode: fast\n")
        monkeypatch.setenv("GCPCTL_GCLOUD", "/opt/sdk/bin/gcloud")
        monkeypatch.setenv("GCPCTL_PROJECT_LIMIT", "7")

        config = Config(config_dir=config_dir)

        assert config.gcloud_binary == "/opt/sdk/bin/gcloud"
        assert config.gcloud_timeout_seconds is None
        assert config.project_limit == 7
        assert config.keybinding == "C-c g"


def test_deep_merge_keeps_siblings():
    base = {"gcloud": {"binary": "gcloud", "timeout_seconds": None}}

    _deep_merge(base, {"gcloud": {"timeout_seconds": 5}})

    assert base == {"gcloud": {"binary": "gcloud", "timeout_seconds": 5}}
