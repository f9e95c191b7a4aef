"""Configuration and payload documents for the command line renderer."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """The `[settings]` table of a payload document."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    indent: int | None = 2
    sort_keys: bool = False


class PayloadDocument(BaseModel):
    """A TOML document describing the embeds and the modal to render.

    The embed and modal tables use the same keys as the wire records.
    They are kept as plain mappings here, the builders check them.
    """

    settings: RenderConfig = Field(default_factory=RenderConfig)
    embeds: list[dict[str, Any]] = Field(default_factory=list)
    modal: dict[str, Any] | None = None

    @classmethod
    def from_file(cls, path: Path) -> PayloadDocument:
        """Load and validate a payload document.

        :param path: The path to the TOML file
        :return: The validated document
        """
        with path.open("rb") as payload_file:
            return cls(**tomllib.load(payload_file))
