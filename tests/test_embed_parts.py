"""Tests for building the parts of an embed.

Footers and fields check their limits both when they are created
directly and when they are built step by step.
"""

import pytest

from discord_rich_content.embed import EmbedAuthor, EmbedField, EmbedFooter, EmbedThumbnail
from discord_rich_content.embed_builder import (
    EmbedAuthorBuilder,
    EmbedFieldBuilder,
    EmbedFooterBuilder,
    EmbedThumbnailBuilder,
)
from discord_rich_content.exceptions import FieldTooLongError


def test_footer_text_at_limit_is_accepted() -> None:
    footer = EmbedFooterBuilder().text("a" * 2048).build()

    assert footer.text == "a" * 2048


def test_footer_text_over_limit_is_rejected() -> None:
    # GIVEN a footer builder with some text
    builder = EmbedFooterBuilder().text("Starts at 09:55")

    # WHEN text with 2049 characters is set
    with pytest.raises(FieldTooLongError) as exc_info:
        builder.text("a" * 2049)

    # THEN the violation is reported and the previous text is kept
    assert (exc_info.value.field, exc_info.value.max, exc_info.value.actual) == ("text", 2048, 2049)
    assert builder.build().text == "Starts at 09:55"


def test_footer_created_directly_is_checked() -> None:
    with pytest.raises(FieldTooLongError):
        EmbedFooter(text="a" * 2049)


def test_footer_urls() -> None:
    footer = EmbedFooterBuilder().icon_url("https://icon").proxy_url("https://proxy").build()

    assert footer == EmbedFooter(text="", icon_url="https://icon", proxy_icon_url="https://proxy")


def test_default_field_is_empty() -> None:
    assert EmbedFieldBuilder().build() == EmbedField(name="", value="", inline=None)


def test_field_with_all_attributes() -> None:
    field = EmbedFieldBuilder().name("Room").value("Forum Hall").inline(True).build()

    assert field == EmbedField(name="Room", value="Forum Hall", inline=True)


@pytest.mark.parametrize(
    ("attribute", "limit"),
    [
        pytest.param("name", 256, id="Field name"),
        pytest.param("value", 1024, id="Field value"),
    ],
)
def test_field_text_limits(attribute: str, limit: int) -> None:
    """The limit itself is accepted, one more character is not."""
    # GIVEN a field builder
    builder = EmbedFieldBuilder()
    setter = getattr(builder, attribute)

    # WHEN the text is set at the limit, THEN it is accepted
    setter("x" * limit)
    assert getattr(builder.build(), attribute) == "x" * limit

    # WHEN the text is one character over the limit, THEN it is rejected
    with pytest.raises(FieldTooLongError) as exc_info:
        setter("x" * (limit + 1))
    assert exc_info.value.field == attribute
    assert exc_info.value.max == limit
    assert exc_info.value.actual == limit + 1
    # AND the accepted text is kept
    assert getattr(builder.build(), attribute) == "x" * limit


def test_author_is_not_limited() -> None:
    author = (
        EmbedAuthorBuilder()
        .name("n" * 1000)
        .url("https://ada.website")
        .icon_url("https://ada.avatar")
        .proxy_url("https://proxy.avatar")
        .build()
    )

    assert author == EmbedAuthor(
        name="n" * 1000,
        url="https://ada.website",
        icon_url="https://ada.avatar",
        proxy_icon_url="https://proxy.avatar",
    )


def test_thumbnail() -> None:
    thumbnail = (
        EmbedThumbnailBuilder()
        .url("https://thumb")
        .proxy_url("https://proxy.thumb")
        .dimensions(height=64, width=128)
        .build()
    )

    assert thumbnail == EmbedThumbnail(
        url="https://thumb", proxy_url="https://proxy.thumb", height=64, width=128
    )
