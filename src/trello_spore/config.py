"""Settings describing which API is scraped and where its pages live.

Defaults describe the Trello API. A YAML file can override any field::

    name: Trello
    regions: [board, card]
    url_template: https://trello.com/docs/api/{name}/index.html
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from trello_spore.exceptions import ConfigError

DEFAULT_REGIONS = [
    "action", "board", "card", "checklist", "list", "member",
    "notification", "organization", "search", "token", "type",
]


class ApiSettings(BaseModel):
    """Constant descriptor fields plus where to fetch each region."""

    name: str = "Trello"
    base_url: str = "https://api.trello.com"
    formats: list[str] = ["json"]
    version: str = "0.1"
    regions: list[str] = DEFAULT_REGIONS
    url_template: str = "https://trello.com/docs/api/{name}/index.html"
    timeout: float = 30.0

    @field_validator("url_template")
    @classmethod
    def _only_name_placeholder(cls, value: str) -> str:
        try:
            value.format(name="region")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"url_template may only use the {{name}} placeholder: {e!r}") from e
        return value

    def region_url(self, region: str) -> str:
        return self.url_template.format(name=region)


def load_settings(file_path: Path | None = None) -> ApiSettings:
    """Load settings from a YAML file, or the defaults when no file is given."""
    if file_path is None:
        return ApiSettings()

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read settings from {file_path}: {e}") from e

    if data is None:
        return ApiSettings()
    if not isinstance(data, dict):
        raise ConfigError(f"Settings in {file_path} must be a mapping")
    try:
        return ApiSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {file_path}: {e}") from e
