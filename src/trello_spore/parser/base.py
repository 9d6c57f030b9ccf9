"""Data models for the SPORE API descriptor.

Extractors build these, the assembler collects them, and the CLI dumps
them to JSON.
"""

from pydantic import BaseModel, ConfigDict, Field


class ParamInfo(BaseModel):
    """Extra metadata for one documented argument."""

    default_value: str | None = None
    valid_values: list[str] | None = None
    allow_multiple: bool | None = None

    def is_empty(self) -> bool:
        return self.default_value is None and not self.valid_values and not self.allow_multiple


class MethodRecord(BaseModel):
    """A single API method: verb, path template and its parameters."""

    model_config = ConfigDict(populate_by_name=True)

    method: str  # GET / POST / PUT / DELETE
    path: str  # /1/boards/:board_id
    required_params: list[str] = []
    optional_params: list[str] = []
    param_info: dict[str, ParamInfo] | None = Field(default=None, alias="_params_infos")


class ConfigDocument(BaseModel):
    """Top-level SPORE description of the whole API."""

    name: str
    base_url: str
    formats: list[str]
    version: str
    methods: dict[str, MethodRecord] = {}

    def payload(self) -> dict:
        """JSON-ready dict using the SPORE key names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Argument(BaseModel):
    """One entry of a method's documented ``Arguments`` list."""

    name: str
    required: bool
    info: ParamInfo = Field(default_factory=ParamInfo)
