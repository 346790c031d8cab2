"""Tests for export configuration loading and validation."""

import json

import pytest
from pydantic import ValidationError

from element_copier.config import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    ExportConfig,
    ExportConfigLoader,
    load_export_config,
)
from element_copier.errors import ConfigurationError, ErrorCategory

pytestmark = pytest.mark.unit


class TestExportConfig:
    """Tests for the ExportConfig model."""

    def test_defaults(self):
        config = ExportConfig()
        assert config.root_class_name == "copied-el"
        assert config.child_class_prefix == "copied-el-c"
        assert config.ignored_id_prefix == "__html-picker"
        assert config.indent_width == 2
        assert config.inline_text_limit == 80

    def test_child_class_name(self):
        assert ExportConfig().child_class_name(3) == "copied-el-c3"

    def test_camel_case_keys(self):
        config = ExportConfig.from_dict({"rootClassName": "snippet", "indentWidth": 4})
        assert config.root_class_name == "snippet"
        assert config.indent_width == 4

    def test_snake_case_keys(self):
        config = ExportConfig.from_dict({"root_class_name": "snippet"})
        assert config.root_class_name == "snippet"

    def test_to_dict_uses_file_keys(self):
        data = ExportConfig().to_dict()
        assert data["rootClassName"] == "copied-el"
        assert data["inlineTextLimit"] == 80

    @pytest.mark.parametrize(
        "data",
        [
            {"indentWidth": 0},
            {"indentWidth": 9},
            {"inlineTextLimit": 0},
            {"rootClassName": ""},
            {"unknownKey": 1},
            {"rootClassName": "x1", "childClassPrefix": "x"},
        ],
    )
    def test_invalid_values(self, data):
        with pytest.raises(ConfigurationError) as exc_info:
            ExportConfig.from_dict(data)
        assert exc_info.value.category == ErrorCategory.CONFIGURATION

    def test_class_names_may_share_a_prefix(self):
        config = ExportConfig.from_dict({"rootClassName": "x", "childClassPrefix": "x"})
        assert config.child_class_name(1) == "x1"

    def test_frozen(self):
        config = ExportConfig()
        with pytest.raises(ValidationError):
            config.indent_width = 4


class TestExportConfigLoader:
    """Tests for config file discovery."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert ExportConfigLoader(tmp_path).load() == ExportConfig()

    def test_project_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"indentWidth": 4}))

        assert ExportConfigLoader(tmp_path).load().indent_width == 4

    def test_env_var_overrides_project_file(self, tmp_path, monkeypatch):
        (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"indentWidth": 4}))
        env_file = tmp_path / "env.json"
        env_file.write_text(json.dumps({"indentWidth": 6}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))

        assert ExportConfigLoader(tmp_path).load().indent_width == 6

    def test_missing_env_file_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.json"))
        assert ExportConfigLoader(tmp_path).load() == ExportConfig()

    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"indentWidth": 4}))
        explicit = tmp_path / "explicit.json"
        explicit.write_text(json.dumps({"indentWidth": 3}))

        assert load_export_config(explicit, tmp_path).indent_width == 3

    def test_explicit_missing_path(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_export_config(tmp_path / "missing.json", tmp_path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="not valid JSON") as exc_info:
            load_export_config(path, tmp_path)
        assert exc_info.value.details == {"config_file": str(path)}

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigurationError, match="JSON object"):
            load_export_config(path, tmp_path)

    def test_invalid_value_in_file(self, tmp_path):
        path = tmp_path / "bad-value.json"
        path.write_text(json.dumps({"indentWidth": "wide"}))

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_export_config(path, tmp_path)
