"""Exceptions raised while building embeds and modals."""

from __future__ import annotations

from typing import ClassVar

import attrs


class RichContentError(Exception):
    """Base class for all rich content exceptions."""


class BuilderError(RichContentError, ValueError):
    """Raised when a builder rejects a mutation.

    The builder is left exactly as it was before the rejected call.
    """


@attrs.define
class FieldTooLongError(BuilderError):
    """Raised when a text attribute exceeds the platform's length limit."""

    field: str
    max: int
    actual: int

    def __str__(self) -> str:
        """Provide the attribute name and the violated limit."""
        return f"{self.field!r} is {self.actual} characters long, the maximum is {self.max}"


@attrs.define
class TooManyItemsError(BuilderError):
    """Raised when an item is added to a collection that is already full."""

    collection: str
    max: int

    def __str__(self) -> str:
        """Provide the collection name and its capacity."""
        return f"{self.collection!r} already holds the maximum of {self.max} items"


class ModalConversionError(RichContentError):
    """Base class for errors raised when finalizing a modal."""

    message: ClassVar[str] = "Modal could not be built!"

    def __str__(self) -> str:
        return self.message


class MissingCustomIdError(ModalConversionError):
    """The modal has no custom id."""

    message = "Missing a custom id for modal!"


class MissingTitleError(ModalConversionError):
    """The modal has no title."""

    message = "Missing a title for modal!"


class MissingComponentsError(ModalConversionError):
    """Modals need at least one component."""

    message = "Modal does not contain any components!"


class TooManyComponentsError(ModalConversionError):
    """Modals may only have up to five components."""

    message = "Modal contains too many components!"
