from pathlib import Path

import pytest

from trello_spore.config import DEFAULT_REGIONS, ApiSettings, load_settings
from trello_spore.exceptions import ConfigError

FIXTURES = Path(__file__).parent / "fixtures"


class TestApiSettings:
    def test_defaults(self):
        settings = ApiSettings()
        assert settings.regions == DEFAULT_REGIONS
        assert settings.regions[0] == "action"
        assert settings.regions[-1] == "type"

    def test_region_url(self):
        assert ApiSettings().region_url("board") == "https://trello.com/docs/api/board/index.html"


class TestLoadSettings:
    def test_no_file_gives_defaults(self):
        assert load_settings() == ApiSettings()

    def test_yaml_overrides(self):
        settings = load_settings(FIXTURES / "settings.yaml")
        assert settings.regions == ["board", "card"]
        assert settings.timeout == 5
        assert settings.base_url == "https://api.trello.com"
        assert settings.region_url("card") == "https://trello.example/docs/card/index.html"

    def test_empty_file_gives_defaults(self, tmp_path):
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert load_settings(f) == ApiSettings()

    def test_not_a_mapping(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- board\n- card\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(f)

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("regions: [board\n")
        with pytest.raises(ConfigError):
            load_settings(f)

    def test_invalid_field(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("timeout: soon\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(f)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "nope.yaml")

    def test_unknown_url_placeholder(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("url_template: https://x/{region}.html\n")
        with pytest.raises(ConfigError, match="url_template"):
            load_settings(f)

    def test_positional_url_placeholder(self):
        with pytest.raises(ValueError):
            ApiSettings(url_template="https://x/{}.html")
