"""Render payload documents into the JSON Discord expects.

Every embed and modal in the document is passed through the builders,
so a payload that renders is known to respect Discord's limits.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import pydantic
from cattrs.errors import ForbiddenExtraKeysError

from discord_rich_content import serialization
from discord_rich_content.color import DEFAULT_COLOR
from discord_rich_content.configuration import PayloadDocument
from discord_rich_content.embed import Embed, EmbedField
from discord_rich_content.embed_builder import EmbedBuilder
from discord_rich_content.exceptions import RichContentError
from discord_rich_content.modal import Modal
from discord_rich_content.modal_builder import ModalBuilder

_logger = logging.getLogger(__name__)


def build_embed(record: Mapping[str, Any]) -> Embed:
    """Build an embed from a payload table.

    Embeds without a color get the default color.

    :param record: An embed table using wire record keys
    :return: The checked embed
    :raises cattrs.errors.ForbiddenExtraKeysError: For unknown keys
    """
    record = dict(record)
    title = record.pop("title", None)
    timestamp = record.pop("timestamp", None)
    color = record.pop("color", DEFAULT_COLOR)
    fields = record.pop("fields", [])

    builder = EmbedBuilder(serialization.embed_from_wire(record, strict=True)).color(color)
    if title is not None:
        builder.title(title)
    if timestamp is not None:
        builder.timestamp(timestamp)
    for field in fields:
        builder.add_field(serialization.strict_converter.structure(field, EmbedField))
    return builder.build()


def build_modal(record: Mapping[str, Any]) -> Modal:
    """Build a modal from a payload table.

    :param record: A modal table using wire record keys
    :return: The validated modal
    """
    modal = serialization.modal_from_wire(dict(record), strict=True)
    builder = ModalBuilder().custom_id(modal.custom_id).title(modal.title)
    for component in modal.components:
        builder.add_component(component)
    return builder.build()


def render(document: PayloadDocument) -> dict[str, Any]:
    """Render a payload document into a wire record.

    :param document: The payload document
    :return: A record with the `embeds` and `modal` keys that were given
    """
    payload: dict[str, Any] = {}
    if document.embeds:
        payload["embeds"] = [serialization.to_wire(build_embed(e)) for e in document.embeds]
    if document.modal is not None:
        payload["modal"] = serialization.to_wire(build_modal(document.modal))
    return payload


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render Discord embeds and modals into JSON")
    parser.add_argument("payload_file", type=Path, help="TOML file describing the payload")
    parser.add_argument("--output", type=Path, help="Write the JSON to this file instead of stdout")
    args = parser.parse_args(argv)

    try:
        document = PayloadDocument.from_file(args.payload_file)
    except (OSError, tomllib.TOMLDecodeError, pydantic.ValidationError) as exc:
        parser.error(f"cannot load {args.payload_file}: {exc}")

    logging.basicConfig(
        level=document.settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        payload = render(document)
    except (RichContentError, ForbiddenExtraKeysError, ValueError, TypeError) as exc:
        # structuring errors of malformed tables are ValueError or TypeError
        _logger.error("Rendering %s failed: %s", args.payload_file, exc)  # noqa: TRY400
        return 1

    rendered = json.dumps(payload, indent=document.settings.indent, sort_keys=document.settings.sort_keys)
    if args.output:
        args.output.write_text(rendered + "\n", encoding="utf-8")
        _logger.info("Wrote rendered payload to %s", args.output)
    else:
        print(rendered)  # noqa: T201
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
