# mosaic/readme/contracts/gist.py
"""
Wire models for the GitHub gist API and the deploy record stored in it.

Only the fields the README needs are modelled; everything else in the
payloads is ignored.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _WireModel(BaseModel):
    """Base for decoded payloads: unknown keys ignored, ``null`` means absent."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class GistFile(_WireModel):
    content: str = ""


class Gist(_WireModel):
    """``GET /gists/{id}`` response, reduced to its file map."""

    files: dict[str, GistFile] = Field(default_factory=dict)

    @field_validator("files", mode="before")
    @classmethod
    def _null_files_are_empty(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: {} if v is None else v for k, v in value.items()}
        return value


class DeployJobData(_WireModel):
    mosaic_tile_address: str = ""


class DeployJob(_WireModel):
    data: DeployJobData = Field(default_factory=DeployJobData)


class DeployRecord(_WireModel):
    """Deploy document embedded as a JSON string in the deploy gist file.

    Shape::

        {"timestamp": "...", "job": {"data": {"mosaic_tile_address": "..."}}}
    """

    timestamp: str = ""
    job: DeployJob = Field(default_factory=DeployJob)

    @property
    def mosaic_tile_address(self) -> str:
        return self.job.data.mosaic_tile_address
