"""Builders that construct embeds while checking Discord's limits.

Every setter either applies the change and returns the builder, so
calls can be chained, or raises a `BuilderError` and leaves the builder
untouched. The builders never modify a value in place: each change
swaps in a new, fully validated frozen value.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import SupportsInt

import arrow
import attrs

from discord_rich_content.color import Color
from discord_rich_content.embed import (
    MAX_LEN,
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedThumbnail,
)
from discord_rich_content.exceptions import TooManyItemsError
from discord_rich_content.validators import check_length

_logger = logging.getLogger(__name__)


@attrs.define
class EmbedBuilder:
    """Build an `Embed`.

    Only the title length and the number of fields are checked; the
    limits of footers and fields are checked when those are built. An
    embed the builder starts from is checked the same way.
    """

    _embed: Embed = attrs.field(factory=Embed)

    @_embed.validator
    def _embed_limits_validator(self, attribute: attrs.Attribute, value: Embed) -> None:
        """Validate the title length and the number of fields."""
        del attribute  # unused
        if value.title is not None:
            check_length("title", value.title, MAX_LEN["title"])
        if value.fields is not None and len(value.fields) > MAX_LEN["fields"]:
            raise TooManyItemsError(collection="fields", max=MAX_LEN["fields"])

    def title(self, title: str) -> EmbedBuilder:
        """Set the title of the embed.

        :raises FieldTooLongError: If the title exceeds 256 characters
        """
        check_length("title", title, MAX_LEN["title"])
        self._embed = attrs.evolve(self._embed, title=title)
        return self

    def description(self, description: str) -> EmbedBuilder:
        """Set the description. Its length is not checked."""
        self._embed = attrs.evolve(self._embed, description=description)
        return self

    def url(self, url: str) -> EmbedBuilder:
        """Set the url the title links to."""
        self._embed = attrs.evolve(self._embed, url=url)
        return self

    def color(self, color: Color | SupportsInt) -> EmbedBuilder:
        """Set the color from a `Color` or a packed integer."""
        self._embed = attrs.evolve(self._embed, color=int(color))
        return self

    def timestamp(self, timestamp: datetime | arrow.Arrow) -> EmbedBuilder:
        """Set the timestamp. Naive datetimes are taken to be in UTC."""
        self._embed = attrs.evolve(self._embed, timestamp=arrow.get(timestamp).to("utc"))
        return self

    def footer(self, footer: EmbedFooter) -> EmbedBuilder:
        self._embed = attrs.evolve(self._embed, footer=footer)
        return self

    def author(self, author: EmbedAuthor) -> EmbedBuilder:
        self._embed = attrs.evolve(self._embed, author=author)
        return self

    def image(self, image: EmbedImage) -> EmbedBuilder:
        self._embed = attrs.evolve(self._embed, image=image)
        return self

    def thumbnail(self, thumbnail: EmbedThumbnail) -> EmbedBuilder:
        self._embed = attrs.evolve(self._embed, thumbnail=thumbnail)
        return self

    def add_field(self, field: EmbedField) -> EmbedBuilder:
        """Append a field, keeping the order in which fields are added.

        :raises TooManyItemsError: If the embed already has 25 fields
        """
        fields = self._embed.fields or ()
        if len(fields) >= MAX_LEN["fields"]:
            _logger.warning("Field limit (%d) reached, rejecting field %r", MAX_LEN["fields"], field.name)
            raise TooManyItemsError(collection="fields", max=MAX_LEN["fields"])
        self._embed = attrs.evolve(self._embed, fields=(*fields, field))
        return self

    def build(self) -> Embed:
        """Return the embed. Embeds have no required attributes."""
        _logger.debug("Built embed with %d field(s)", len(self._embed.fields or ()))
        return self._embed


@attrs.define
class EmbedFooterBuilder:
    """Build an `EmbedFooter`."""

    _footer: EmbedFooter = attrs.field(factory=EmbedFooter)

    def text(self, text: str) -> EmbedFooterBuilder:
        """Set the footer text.

        :raises FieldTooLongError: If the text exceeds 2048 characters
        """
        self._footer = attrs.evolve(self._footer, text=text)
        return self

    def icon_url(self, url: str) -> EmbedFooterBuilder:
        """Set the url of the footer icon (only http(s) and attachments)."""
        self._footer = attrs.evolve(self._footer, icon_url=url)
        return self

    def proxy_url(self, url: str) -> EmbedFooterBuilder:
        """Set a proxied url of the footer icon."""
        self._footer = attrs.evolve(self._footer, proxy_icon_url=url)
        return self

    def build(self) -> EmbedFooter:
        return self._footer


@attrs.define
class EmbedFieldBuilder:
    """Build an `EmbedField`."""

    _field: EmbedField = attrs.field(factory=EmbedField)

    def name(self, name: str) -> EmbedFieldBuilder:
        """Set the field name.

        :raises FieldTooLongError: If the name exceeds 256 characters
        """
        self._field = attrs.evolve(self._field, name=name)
        return self

    def value(self, value: str) -> EmbedFieldBuilder:
        """Set the field text.

        :raises FieldTooLongError: If the value exceeds 1024 characters
        """
        self._field = attrs.evolve(self._field, value=value)
        return self

    def inline(self, inline: bool) -> EmbedFieldBuilder:  # noqa: FBT001 (boolean positional arg)
        """Set whether the field is displayed inline."""
        self._field = attrs.evolve(self._field, inline=inline)
        return self

    def build(self) -> EmbedField:
        return self._field


@attrs.define
class EmbedAuthorBuilder:
    """Build an `EmbedAuthor`. None of the attributes are checked."""

    _author: EmbedAuthor = attrs.field(factory=EmbedAuthor)

    def name(self, name: str) -> EmbedAuthorBuilder:
        self._author = attrs.evolve(self._author, name=name)
        return self

    def url(self, url: str) -> EmbedAuthorBuilder:
        """Set the url users can click on."""
        self._author = attrs.evolve(self._author, url=url)
        return self

    def icon_url(self, url: str) -> EmbedAuthorBuilder:
        self._author = attrs.evolve(self._author, icon_url=url)
        return self

    def proxy_url(self, url: str) -> EmbedAuthorBuilder:
        """Set a proxied url of the author icon."""
        self._author = attrs.evolve(self._author, proxy_icon_url=url)
        return self

    def build(self) -> EmbedAuthor:
        return self._author


@attrs.define
class EmbedThumbnailBuilder:
    """Build an `EmbedThumbnail`."""

    _thumbnail: EmbedThumbnail = attrs.field(factory=EmbedThumbnail)

    def url(self, url: str) -> EmbedThumbnailBuilder:
        self._thumbnail = attrs.evolve(self._thumbnail, url=url)
        return self

    def proxy_url(self, url: str) -> EmbedThumbnailBuilder:
        self._thumbnail = attrs.evolve(self._thumbnail, proxy_url=url)
        return self

    def dimensions(self, height: int, width: int) -> EmbedThumbnailBuilder:
        """Set the height and width of the thumbnail."""
        self._thumbnail = attrs.evolve(self._thumbnail, height=height, width=width)
        return self

    def build(self) -> EmbedThumbnail:
        return self._thumbnail
