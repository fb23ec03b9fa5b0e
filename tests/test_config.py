"""
Tests for the Config module
"""

import json
import os
import tempfile
import pytest

from windsort.config import (
    Config,
    Settings,
    WriteMode,
    load_config,
    find_config_file,
    save_config_template,
    DEFAULT_EXTENSIONS,
    DEFAULT_IGNORED_DIRS,
)
from windsort.exceptions import ConfigError
from windsort.extractor import DEFAULT_EXTRACTOR
from windsort.order import DEFAULT_ORDER_TABLE


class TestConfig:
    """Test cases for Config class"""

    def test_default_config(self):
        """Test default configuration values"""
        config = Config()

        assert isinstance(config.settings, Settings)
        assert config.extensions == DEFAULT_EXTENSIONS
        assert config.ignored_dirs == DEFAULT_IGNORED_DIRS
        assert config.sort_order == []
        assert config.replace_default_order is False

    def test_defaults_are_copies(self):
        """Test that instances do not share extension sets"""
        config = Config()
        config.extensions.add('.foo')

        assert '.foo' not in DEFAULT_EXTENSIONS
        assert '.foo' not in Config().extensions

    def test_is_candidate(self):
        """Test extension filtering"""
        config = Config()

        assert config.is_candidate("index.html")
        assert config.is_candidate("App.TSX")
        assert config.is_candidate("page.vue")
        assert not config.is_candidate("styles.css")
        assert not config.is_candidate("README")

    def test_default_order_table_is_shared(self):
        """Test that no sort_order means the process-wide table"""
        assert Config().build_order_table() is DEFAULT_ORDER_TABLE

    def test_sort_order_extends_default(self):
        """Test that custom names rank after the default table"""
        config = Config(sort_order=["btn", "card"])
        table = config.build_order_table()

        assert table.lookup("flex") == DEFAULT_ORDER_TABLE.lookup("flex")
        assert table.lookup("btn") < table.lookup("card")
        assert table.lookup("btn") > table.lookup("flex")

    def test_sort_order_replaces_default(self):
        """Test replacing the whole order"""
        config = Config(sort_order=["card", "flex"], replace_default_order=True)
        table = config.build_order_table()

        assert table.lookup("card") == 0
        assert table.lookup("flex") == 1
        assert table.lookup("p-4") is None

    def test_build_extractor(self):
        """Test default and custom extractors"""
        assert Config().build_extractor() is DEFAULT_EXTRACTOR

        config = Config()
        config.settings.custom_regex = r'tw="([^"]*)"'
        extractor = config.build_extractor()
        assert extractor.has_classes('tw="a b"')

    def test_build_extractor_invalid_regex(self):
        """Test that a broken custom regex is a config error"""
        config = Config()
        config.settings.custom_regex = "("

        with pytest.raises(ConfigError):
            config.build_extractor()


class TestSettings:
    """Test cases for Settings dataclass"""

    def test_default_settings(self):
        """Test default settings values"""
        settings = Settings()

        assert settings.allow_duplicates is False
        assert settings.write_mode == WriteMode.TO_CONSOLE
        assert settings.skip_hidden is True
        assert settings.workers is None
        assert settings.custom_regex is None
        assert settings.verbose is False

    def test_custom_settings(self):
        """Test custom settings values"""
        settings = Settings(
            allow_duplicates=True,
            write_mode=WriteMode.TO_FILE,
            workers=2
        )

        assert settings.allow_duplicates is True
        assert settings.write_mode == WriteMode.TO_FILE
        assert settings.workers == 2


class TestLoadConfig:
    """Test cases for config loading"""

    def test_load_default_config(self, tmp_path, monkeypatch):
        """Test loading without config file"""
        monkeypatch.setattr("windsort.config.Path.home", lambda: tmp_path / "home")
        config = load_config(start_path=str(tmp_path))

        assert isinstance(config, Config)
        assert config.settings.allow_duplicates is False

    def test_load_from_json_file(self):
        """Test loading from JSON config file"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            json.dump({
                "settings": {
                    "allow_duplicates": True,
                    "workers": 3,
                    "write_mode": "dry-run",
                    "unknown_key": 1
                },
                "extensions": ["html", ".JSX"],
                "ignored_dirs": ["out"],
                "sort_order": ["btn"]
            }, f)
            f.flush()

            try:
                config = load_config(f.name)

                assert config.settings.allow_duplicates is True
                assert config.settings.workers == 3
                assert config.settings.write_mode == WriteMode.DRY_RUN
                assert not hasattr(config.settings, "unknown_key")
                assert config.extensions == {".html", ".jsx"}
                assert config.ignored_dirs == {"out"}
                assert config.sort_order == ["btn"]
                assert config.replace_default_order is False
            finally:
                os.unlink(f.name)

    def test_load_invalid_path(self):
        """Test loading from non-existent file"""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/config.json")

    def test_load_invalid_json(self):
        """Test loading from invalid JSON file"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            f.write("not valid json {{{")
            f.flush()

            try:
                with pytest.raises(ValueError):
                    load_config(f.name)
            finally:
                os.unlink(f.name)

    @pytest.mark.parametrize("data", [
        [1, 2, 3],
        {"sort_order": "flex p-4"},
        {"extensions": [1]},
        {"settings": []},
        {"settings": {"write_mode": "sideways"}},
        {"settings": {"workers": "4"}},
        {"settings": {"workers": 0}},
        {"settings": {"workers": True}},
        {"settings": {"custom_regex": 5}},
        {"settings": {"allow_duplicates": "yes"}},
        {"settings": {"log_file": ["a.log"]}},
        {"replace_default_order": "true"},
    ])
    def test_load_bad_values(self, tmp_path, data):
        """Test that wrongly typed values raise ConfigError"""
        path = tmp_path / "windsort.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_load_null_settings(self, tmp_path):
        """Test that null clears optional settings"""
        path = tmp_path / "windsort.json"
        path.write_text(json.dumps({"settings": {"workers": None, "custom_regex": None}}), encoding="utf-8")

        config = load_config(str(path))
        assert config.settings.workers is None
        assert config.settings.custom_regex is None


class TestFindConfigFile:
    """Test cases for config discovery"""

    def test_finds_file_in_parent(self, tmp_path, monkeypatch):
        """Test searching upward from a nested directory"""
        monkeypatch.setattr("windsort.config.Path.home", lambda: tmp_path / "home")
        (tmp_path / ".windsortrc").write_text("{}", encoding="utf-8")
        nested = tmp_path / "src" / "components"
        nested.mkdir(parents=True)

        assert find_config_file(str(nested)) == tmp_path.resolve() / ".windsortrc"

    def test_user_config_fallback(self, tmp_path, monkeypatch):
        """Test falling back to ~/.windsort/config.json"""
        home = tmp_path / "home"
        (home / ".windsort").mkdir(parents=True)
        (home / ".windsort" / "config.json").write_text("{}", encoding="utf-8")
        monkeypatch.setattr("windsort.config.Path.home", lambda: home)
        project = tmp_path / "project"
        project.mkdir()

        assert find_config_file(str(project)) == home / ".windsort" / "config.json"

    def test_auto_detected_config_is_loaded(self, tmp_path, monkeypatch):
        """Test that a discovered config file is applied"""
        monkeypatch.setattr("windsort.config.Path.home", lambda: tmp_path / "home")
        (tmp_path / "windsort.json").write_text(
            json.dumps({"settings": {"allow_duplicates": True}}), encoding="utf-8"
        )

        assert load_config(start_path=str(tmp_path)).settings.allow_duplicates is True


class TestSaveConfigTemplate:
    """Test cases for config template generation"""

    def test_save_template(self):
        """Test saving config template"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            path = f.name

        try:
            save_config_template(path)

            assert os.path.exists(path)

            with open(path, 'r') as f:
                data = json.load(f)

            assert "settings" in data
            assert "extensions" in data
            assert "sort_order" in data
        finally:
            if os.path.exists(path):
                os.unlink(path)

    def test_template_loads_back(self, tmp_path):
        """Test that the template is itself a valid config"""
        path = tmp_path / "windsort.json"
        save_config_template(str(path))

        config = load_config(str(path))
        assert config.sort_order == ["btn", "btn-primary", "card"]
        assert config.settings.workers == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
