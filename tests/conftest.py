from collections.abc import Callable

import pytest

from discord_rich_content.embed import EmbedField
from discord_rich_content.modal import MessageComponent


@pytest.fixture()
def fields() -> list[EmbedField]:
    """Return the maximum number of distinct embed fields."""
    return [EmbedField(name=f"Field {i}", value=f"Value {i}", inline=i % 2 == 0) for i in range(25)]


@pytest.fixture()
def component_factory() -> Callable[[int], MessageComponent]:
    """Return a factory for text input components, wrapped in action rows."""
    return _component_factory


def _component_factory(index: int) -> MessageComponent:
    """Create an action row holding one text input.

    :param index: Used to make the custom id of the input unique
    :return: A component as it would be sent to Discord
    """
    return {
        "type": 1,
        "components": [{"type": 4, "custom_id": f"input-{index}", "label": f"Input {index}", "style": 1}],
    }
