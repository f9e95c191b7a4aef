"""Model to represent a Discord modal.

A modal is a popup form shown in response to an interaction. Once the
user submits the form, Discord sends a modal submit interaction with the
values of its components.
"""

from __future__ import annotations

from typing import Any, Final, TypeAlias

import attrs

# Components are defined elsewhere and treated as opaque values
MessageComponent: TypeAlias = Any

MAX_LEN: Final = {
    "components": 5,
    "custom_id": 100,
}


@attrs.define(frozen=True)
class Modal:
    """A Discord modal.

    The model does not check any limits by itself, use a `ModalBuilder`
    to get a checked modal.
    """

    custom_id: str = ""
    title: str = ""
    components: tuple[MessageComponent, ...] = attrs.field(factory=tuple, converter=tuple)
