"""Unit tests for the config module."""

import pytest
import yaml

from oci_gen.utils.config import (
    GeneratorConfig,
    LoggingConfig,
    OciGenConfig,
    OutputConfig,
    get_config,
    get_config_paths,
    get_default_config,
    load_config,
    save_config,
    set_config,
)
from oci_gen.utils.errors import ValidationError


class TestConfigModels:
    """Tests for the config models."""

    def test_generator_defaults(self):
        """Test GeneratorConfig default values."""
        config = GeneratorConfig()
        assert config.host_specific is False
        assert config.template is None

    def test_output_defaults(self):
        """Test OutputConfig default values."""
        config = OutputConfig()
        assert config.default_format == "json"
        assert config.indent == "\t"
        assert config.color is True

    def test_logging_defaults(self):
        """Test LoggingConfig default values."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.structured is False

    def test_nested_defaults(self):
        """Test OciGenConfig builds every section."""
        config = get_default_config()
        assert isinstance(config, OciGenConfig)
        assert config.generator.host_specific is False


class TestConfigPaths:
    """Tests for get_config_paths."""

    def test_search_order(self, monkeypatch, tmp_path):
        """Test local files come before user files."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        paths = get_config_paths()
        assert paths[0] == tmp_path / ".oci-gen.yaml"
        assert paths[-1] == tmp_path / "xdg" / "oci-gen" / "config.yaml"

    def test_no_xdg(self, monkeypatch):
        """Test XDG_CONFIG_HOME is optional."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert len(get_config_paths()) == 5


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_explicit(self, tmp_path):
        """Test loading an explicit config file."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"generator": {"host_specific": True}, "output": {"indent": "  "}}))
        config = load_config(path)
        assert config.generator.host_specific is True
        assert config.output.indent == "  "
        assert config.logging.level == "INFO"

    def test_missing_explicit(self, tmp_path):
        """Test a missing explicit file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        """Test an empty file gives the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == OciGenConfig()

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML raises ValidationError."""
        path = tmp_path / "config.yaml"
        path.write_text("generator: [unclosed")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_invalid_settings(self, tmp_path):
        """Test settings of the wrong type raise ValidationError."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"generator": {"host_specific": "sometimes"}}))
        with pytest.raises(ValidationError):
            load_config(path)

    def test_search_default_locations(self, monkeypatch, tmp_path):
        """Test a config in the working directory is found."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".oci-gen.yaml").write_text(yaml.dump({"output": {"color": False}}))
        assert load_config().output.color is False


class TestSaveConfig:
    """Tests for save_config."""

    def test_save_only_changes(self, tmp_path):
        """Test only non-default values are written."""
        config = OciGenConfig(generator=GeneratorConfig(template="/etc/oci/base.json"))
        path = save_config(config, tmp_path / "sub" / "config.yaml")
        data = yaml.safe_load(path.read_text())
        assert data["generator"] == {"template": "/etc/oci/base.json"}
        assert not data.get("output")

    def test_save_then_load(self, tmp_path):
        """Test a saved config loads back unchanged."""
        config = OciGenConfig(logging=LoggingConfig(level="DEBUG", structured=True))
        path = save_config(config, tmp_path / "config.yaml")
        assert load_config(path) == config


class TestGlobalConfig:
    """Tests for get_config/set_config."""

    def test_set_and_get(self):
        """Test the global config can be replaced."""
        config = OciGenConfig(output=OutputConfig(color=False))
        set_config(config)
        assert get_config() is config
