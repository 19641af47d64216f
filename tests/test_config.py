"""Unit tests for configuration discovery and option resolution (new_component.config).

Tests cover:
- ComponentConfig defaults, aliases, validation, save/load
- load_config layering (defaults < global < local)
- resolve_options precedence and validation
- Options immutability
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from new_component.config import (
    CONFIG_FILENAME,
    ComponentConfig,
    ConfigError,
    MissingArgumentError,
    Options,
    load_config,
    resolve_options,
)

pytestmark = pytest.mark.unit


def _write_config(directory: Path, data: object) -> Path:
    path = directory / CONFIG_FILENAME
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# ComponentConfig
# ---------------------------------------------------------------------------


class TestComponentConfig:
    def test_defaults(self):
        config = ComponentConfig()
        assert config.lang == "js"
        assert config.dir == "src/components"
        assert config.scss_module == "true"
        assert config.prettier_config == {}
        assert config.format is True

    def test_camel_case_aliases(self):
        config = ComponentConfig.model_validate(
            {"scssModule": "false", "prettierConfig": {"semi": False}}
        )
        assert config.scss_module == "false"
        assert config.prettier_config == {"semi": False}

    def test_lang_is_lowercased(self):
        assert ComponentConfig(lang="TS").lang == "ts"

    def test_invalid_lang_rejected(self):
        with pytest.raises(ValidationError):
            ComponentConfig(lang="coffee")

    def test_boolean_scss_module_accepted(self):
        assert ComponentConfig.model_validate({"scssModule": False}).scss_module == "false"

    def test_invalid_scss_module_rejected(self):
        with pytest.raises(ValidationError):
            ComponentConfig.model_validate({"scssModule": "yes"})

    def test_unknown_keys_ignored(self):
        config = ComponentConfig.model_validate({"theme": "dark"})
        assert not hasattr(config, "theme")

    def test_save_and_load_roundtrip(self, tmp_path: Path):
        original = ComponentConfig(lang="ts", dir="app/ui", prettierConfig={"tabWidth": 4})
        path = original.save(tmp_path / "nested" / CONFIG_FILENAME)

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["prettierConfig"] == {"tabWidth": 4}
        assert raw["scssModule"] == "true"

        assert ComponentConfig.load(path) == original


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_no_files_gives_defaults(self, tmp_path: Path):
        config = load_config(cwd=tmp_path, home=tmp_path / "missing-home")
        assert config == ComponentConfig()

    def test_global_overrides_defaults(self, tmp_path: Path):
        home = tmp_path / "home"
        home.mkdir()
        _write_config(home, {"lang": "ts"})

        config = load_config(cwd=tmp_path, home=home)
        assert config.lang == "ts"
        assert config.dir == "src/components"

    def test_local_overrides_global(self, tmp_path: Path):
        home = tmp_path / "home"
        project = tmp_path / "project"
        home.mkdir()
        project.mkdir()
        _write_config(home, {"lang": "ts", "dir": "global/dir"})
        _write_config(project, {"dir": "local/dir"})

        config = load_config(cwd=project, home=home)
        assert config.lang == "ts"
        assert config.dir == "local/dir"

    def test_invalid_json_raises(self, tmp_path: Path):
        (tmp_path / CONFIG_FILENAME).write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Could not parse"):
            load_config(cwd=tmp_path, home=tmp_path / "home")

    def test_non_object_raises(self, tmp_path: Path):
        _write_config(tmp_path, ["js"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(cwd=tmp_path, home=tmp_path / "home")

    def test_invalid_value_raises(self, tmp_path: Path):
        _write_config(tmp_path, {"lang": "python"})
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(cwd=tmp_path, home=tmp_path / "home")

    def test_defaults_to_process_cwd_and_home(self, project_dir: Path, home_dir: Path):
        _write_config(home_dir, {"scssModule": "false"})
        _write_config(project_dir, {"lang": "ts"})

        config = load_config()
        assert config.lang == "ts"
        assert config.scss_module == "false"


# ---------------------------------------------------------------------------
# resolve_options
# ---------------------------------------------------------------------------


class TestResolveOptions:
    def test_falls_back_to_config(self, default_config):
        options = resolve_options("Button", default_config)
        assert options == Options(
            language="js",
            target_dir=Path("src/components"),
            stylesheet_enabled=True,
        )

    def test_cli_flags_win(self, default_config):
        options = resolve_options(
            "Button",
            default_config,
            lang="ts",
            directory="app/components",
            scss_module="false",
        )
        assert options.language == "ts"
        assert options.target_dir == Path("app/components")
        assert options.stylesheet_enabled is False

    def test_case_insensitive_values(self, default_config):
        options = resolve_options("Button", default_config, lang="TS", scss_module="FALSE")
        assert options.language == "ts"
        assert options.stylesheet_enabled is False

    @pytest.mark.parametrize("name", [None, ""])
    def test_missing_name(self, default_config, name):
        with pytest.raises(MissingArgumentError, match="specify a name"):
            resolve_options(name, default_config)

    def test_invalid_lang(self, default_config):
        with pytest.raises(ConfigError, match="--lang"):
            resolve_options("Button", default_config, lang="jsx")

    def test_invalid_scss_flag(self, default_config):
        with pytest.raises(ConfigError, match="--scss-module"):
            resolve_options("Button", default_config, scss_module="1")

    def test_options_are_frozen(self, default_config):
        options = resolve_options("Button", default_config)
        with pytest.raises(ValidationError):
            options.language = "ts"
