"""Conversion of embeds and modals to and from Discord's wire format.

A wire record is a dictionary keyed by attribute name. Attributes that
are not set are left out of the record instead of being sent as null,
colors are sent as packed integers, timestamps as ISO 8601 text and
ordered collections as lists.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, get_origin

import arrow
import attrs
import cattrs
from cattrs.gen import make_dict_structure_fn, make_dict_unstructure_fn

from discord_rich_content.embed import Embed
from discord_rich_content.modal import Modal


def _create_converter(*, forbid_extra_keys: bool = False) -> cattrs.Converter:
    """Create a converter for wire conversions.

    Detailed validation is disabled so the typed errors raised by the
    model validators reach the caller unwrapped.

    :param forbid_extra_keys: Reject records with unknown keys
    :return: The converter
    """
    converter = cattrs.Converter(detailed_validation=False, forbid_extra_keys=forbid_extra_keys)
    converter.register_structure_hook(arrow.Arrow, lambda raw_dt, _: arrow.get(raw_dt))
    converter.register_unstructure_hook(arrow.Arrow, lambda dt: dt.isoformat())
    converter.register_unstructure_hook_func(
        lambda t: t is tuple or get_origin(t) is tuple,
        lambda items: [converter.unstructure(item) for item in items],
    )

    def _omit_none(cls: type) -> Callable[[Any], dict[str, Any]]:
        unstructure = make_dict_unstructure_fn(cls, converter)

        def _unstructure(instance: Any) -> dict[str, Any]:
            return {key: value for key, value in unstructure(instance).items() if value is not None}

        return _unstructure

    converter.register_unstructure_hook_factory(attrs.has, _omit_none)

    # A record without a color describes an embed without one, the
    # default color only applies to embeds created in code.
    structure_embed = make_dict_structure_fn(
        Embed,
        converter,
        _cattrs_forbid_extra_keys=forbid_extra_keys,
        _cattrs_detailed_validation=False,
    )
    converter.register_structure_hook(
        Embed, lambda record, cls: structure_embed({"color": None, **record}, cls)
    )
    return converter


converter = _create_converter()
strict_converter = _create_converter(forbid_extra_keys=True)


def to_wire(value: Embed | Modal) -> dict[str, Any]:
    """Convert a finished embed or modal into a wire record.

    :param value: The value to convert
    :return: A JSON serializable dictionary
    """
    return converter.unstructure(value)


def embed_from_wire(record: dict[str, Any], *, strict: bool = False) -> Embed:
    """Create an embed from a wire record.

    :param record: The wire record
    :param strict: Reject records with keys that are not embed attributes
    :return: The embed; it has no color if the record has none
    :raises FieldTooLongError: If the footer or a field exceeds its limit
    :raises cattrs.errors.ForbiddenExtraKeysError: For unknown keys in
      strict mode
    """
    return (strict_converter if strict else converter).structure(record, Embed)


def modal_from_wire(record: dict[str, Any], *, strict: bool = False) -> Modal:
    """Create a modal from a wire record. The modal is not validated."""
    return (strict_converter if strict else converter).structure(record, Modal)
