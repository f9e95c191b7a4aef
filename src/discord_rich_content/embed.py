"""Models to represent Discord embeds and their parts."""

from __future__ import annotations

from typing import Final

import arrow
import attrs
from attrs import converters

from discord_rich_content import validators
from discord_rich_content.color import DEFAULT_COLOR, to_packed

# Discord limits enforced by this library
MAX_LEN: Final = {
    "field_name": 256,
    "field_value": 1024,
    "fields": 25,
    "footer": 2048,
    "title": 256,
}


@attrs.define(frozen=True)
class EmbedFooter:
    """The footer of a Discord embed."""

    text: str = attrs.field(default="", validator=validators.max_len(MAX_LEN["footer"]))
    icon_url: str | None = None
    proxy_icon_url: str | None = None


@attrs.define(frozen=True)
class EmbedField:
    """An embed field."""

    name: str = attrs.field(default="", validator=validators.max_len(MAX_LEN["field_name"]))
    value: str = attrs.field(default="", validator=validators.max_len(MAX_LEN["field_value"]))
    inline: bool | None = None


@attrs.define(frozen=True)
class EmbedAuthor:
    """The author of a Discord embed."""

    name: str | None = None
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


@attrs.define(frozen=True)
class EmbedImage:
    """Image information of a Discord embed."""

    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


@attrs.define(frozen=True)
class EmbedThumbnail:
    """Thumbnail information of a Discord embed."""

    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


@attrs.define(frozen=True)
class EmbedVideo:
    """Video information of a Discord embed.

    Videos are only ever set by Discord itself, which is why there is no
    setter for them on the embed builder.
    """

    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


@attrs.define(frozen=True)
class EmbedProvider:
    """Provider information of a Discord embed, set by Discord."""

    name: str | None = None
    url: str | None = None


@attrs.define(frozen=True)
class Embed:
    """A Discord embed.

    Every attribute is optional. The model does not check any limits by
    itself, use an `EmbedBuilder` to get a checked embed.
    """

    title: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: arrow.Arrow | None = None
    color: int | None = to_packed(DEFAULT_COLOR)
    footer: EmbedFooter | None = None
    image: EmbedImage | None = None
    thumbnail: EmbedThumbnail | None = None
    video: EmbedVideo | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: tuple[EmbedField, ...] | None = attrs.field(default=None, converter=converters.optional(tuple))
