"""Attribute validators enforcing the platform's structural limits."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_rich_content.exceptions import FieldTooLongError

if TYPE_CHECKING:
    from collections.abc import Callable

    import attrs


def check_length(field: str, value: str, limit: int) -> None:
    """Raise a `FieldTooLongError` if `value` is longer than `limit`.

    Lengths are counted in characters, not in encoded bytes.

    :param field: The name of the attribute, used in the error
    :param value: The text to check
    :param limit: The maximum number of characters
    """
    if len(value) > limit:
        raise FieldTooLongError(field=field, max=limit, actual=len(value))


def max_len(limit: int) -> Callable[[Any, attrs.Attribute, str | None], None]:
    """Create an attrs validator for a maximum text length.

    Unlike `attrs.validators.max_len`, the validator raises the typed
    `FieldTooLongError` and lets `None` pass.

    :param limit: The maximum number of characters
    :return: A validator to pass to `attrs.field`
    """

    def _validator(instance: Any, attribute: attrs.Attribute, value: str | None) -> None:
        del instance  # unused
        if value is not None:
            check_length(attribute.name, value, limit)

    return _validator
