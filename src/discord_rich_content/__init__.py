"""Build Discord embeds and modals that respect the platform's limits."""

from discord_rich_content.color import DEFAULT_COLOR, Color, from_packed, to_packed
from discord_rich_content.embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedProvider,
    EmbedThumbnail,
    EmbedVideo,
)
from discord_rich_content.embed_builder import (
    EmbedAuthorBuilder,
    EmbedBuilder,
    EmbedFieldBuilder,
    EmbedFooterBuilder,
    EmbedThumbnailBuilder,
)
from discord_rich_content.exceptions import (
    BuilderError,
    FieldTooLongError,
    MissingComponentsError,
    MissingCustomIdError,
    MissingTitleError,
    ModalConversionError,
    RichContentError,
    TooManyComponentsError,
    TooManyItemsError,
)
from discord_rich_content.modal import MessageComponent, Modal
from discord_rich_content.modal_builder import ModalBuilder

__all__ = [
    "DEFAULT_COLOR",
    "BuilderError",
    "Color",
    "Embed",
    "EmbedAuthor",
    "EmbedAuthorBuilder",
    "EmbedBuilder",
    "EmbedField",
    "EmbedFieldBuilder",
    "EmbedFooter",
    "EmbedFooterBuilder",
    "EmbedImage",
    "EmbedProvider",
    "EmbedThumbnail",
    "EmbedThumbnailBuilder",
    "EmbedVideo",
    "FieldTooLongError",
    "MessageComponent",
    "MissingComponentsError",
    "MissingCustomIdError",
    "MissingTitleError",
    "Modal",
    "ModalBuilder",
    "ModalConversionError",
    "RichContentError",
    "TooManyComponentsError",
    "TooManyItemsError",
    "from_packed",
    "to_packed",
]
