"""A builder that constructs modals while checking Discord's limits."""

from __future__ import annotations

import logging

import attrs

from discord_rich_content import exceptions
from discord_rich_content.modal import MAX_LEN, MessageComponent, Modal
from discord_rich_content.validators import check_length

_logger = logging.getLogger(__name__)


@attrs.define
class ModalBuilder:
    """Build a `Modal`.

    Setters raise a `BuilderError` and leave the builder untouched when
    they are rejected. The required attributes and the number of
    components are only checked when `build` is called; the length of
    the custom id of a modal the builder starts from is checked at once.
    """

    _modal: Modal = attrs.field(factory=Modal)

    @_modal.validator
    def _custom_id_validator(self, attribute: attrs.Attribute, value: Modal) -> None:
        """Validate the length of the custom id."""
        del attribute  # unused
        check_length("custom_id", value.custom_id, MAX_LEN["custom_id"])

    def custom_id(self, custom_id: str) -> ModalBuilder:
        """Set the custom id. This is mandatory!

        :raises FieldTooLongError: If the id exceeds 100 characters
        """
        if len(custom_id) > MAX_LEN["custom_id"]:
            _logger.warning("Custom id exceeds %d characters, rejecting it", MAX_LEN["custom_id"])
            raise exceptions.FieldTooLongError(
                field="custom_id", max=MAX_LEN["custom_id"], actual=len(custom_id)
            )
        self._modal = attrs.evolve(self._modal, custom_id=custom_id)
        return self

    def title(self, title: str) -> ModalBuilder:
        """Set the title. This is mandatory!"""
        self._modal = attrs.evolve(self._modal, title=title)
        return self

    def add_component(self, component: MessageComponent) -> ModalBuilder:
        """Add a component to the form.

        A modal needs at least one and at most five components.

        :raises TooManyItemsError: If the modal already has 5 components
        """
        components = self._modal.components
        if len(components) >= MAX_LEN["components"]:
            _logger.warning("Component limit (%d) reached, rejecting component", MAX_LEN["components"])
            raise exceptions.TooManyItemsError(collection="components", max=MAX_LEN["components"])
        self._modal = attrs.evolve(self._modal, components=(*components, component))
        return self

    def build(self) -> Modal:
        """Validate and return the modal.

        The checks run in a fixed order, so the reported error is the
        same no matter how many rules are violated at once.

        :raises ModalConversionError: For the first violated rule
        """
        modal = self._modal
        if not modal.custom_id:
            raise exceptions.MissingCustomIdError
        if not modal.title:
            raise exceptions.MissingTitleError
        if not modal.components:
            raise exceptions.MissingComponentsError
        if len(modal.components) > MAX_LEN["components"]:
            raise exceptions.TooManyComponentsError
        _logger.debug("Built modal %r with %d component(s)", modal.custom_id, len(modal.components))
        return modal
