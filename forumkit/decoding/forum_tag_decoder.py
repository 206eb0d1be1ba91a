from typing import Optional

from pydantic import StrictBool, StrictStr, TypeAdapter

from forumkit.decoding.document import (
    DiagnosticSink,
    MapDocument,
    json_array_documents,
    json_object_document,
)
from forumkit.decoding.errors import DuplicateField, InvalidKey, MissingField
from forumkit.decoding.wire_value import resolve_optional_snowflake
from forumkit.models.forum_tag import ForumTag
from forumkit.models.snowflake import Snowflake
from forumkit.utils.logger import logger

_UNSET = object()

_EMOJI_NAME = TypeAdapter(Optional[StrictStr])
_ID = TypeAdapter(Snowflake)
_MODERATED = TypeAdapter(StrictBool)
_NAME = TypeAdapter(StrictStr)


def decode_forum_tag(
    document: MapDocument,
    diagnostics: DiagnosticSink | None = logger.trace,
) -> ForumTag:
    """Decode a ``ForumTag`` from a map-like wire document.

    Unknown and structurally invalid keys are skipped and reported to
    ``diagnostics`` (pass ``None`` to drop them). ``emoji_id`` accepts
    several wire shapes; anything unusable, including zero, resolves to no
    emoji id instead of failing the decode.

    Raises ``DuplicateField`` when a known key repeats, ``MissingField`` when
    ``id``, ``moderated`` or ``name`` never appears, and ``InvalidValue`` when
    a known field holds a value of the wrong type.
    """
    emoji_id_seen = False
    emoji_id: int | None = None
    emoji_name: object = _UNSET
    tag_id: object = _UNSET
    moderated: object = _UNSET
    name: object = _UNSET

    while True:
        try:
            key = document.next_key()
        except InvalidKey as e:
            document.skip_value()
            if diagnostics is not None:
                diagnostics(f"ran into an invalid key: {e}")
            continue

        if key is None:
            break

        match key:
            case "emoji_id":
                if emoji_id_seen:
                    raise DuplicateField("emoji_id")

                emoji_id_seen = True
                emoji_id = resolve_optional_snowflake(document.next_raw_value())
            case "emoji_name":
                if emoji_name is not _UNSET:
                    raise DuplicateField("emoji_name")

                emoji_name = document.next_value(_EMOJI_NAME)
            case "id":
                if tag_id is not _UNSET:
                    raise DuplicateField("id")

                tag_id = document.next_value(_ID)
            case "moderated":
                if moderated is not _UNSET:
                    raise DuplicateField("moderated")

                moderated = document.next_value(_MODERATED)
            case "name":
                if name is not _UNSET:
                    raise DuplicateField("name")

                name = document.next_value(_NAME)
            case _:
                document.skip_value()
                if diagnostics is not None:
                    diagnostics(f'ran into an unknown key: "{key}"')

    if tag_id is _UNSET:
        raise MissingField("id")
    if moderated is _UNSET:
        raise MissingField("moderated")
    if name is _UNSET:
        raise MissingField("name")

    return ForumTag(
        id=tag_id,  # type: ignore[arg-type]
        name=name,  # type: ignore[arg-type]
        moderated=moderated,  # type: ignore[arg-type]
        emoji_id=emoji_id,
        emoji_name=None if emoji_name is _UNSET else emoji_name,  # type: ignore[arg-type]
    )


def decode_forum_tag_json(
    text: str | bytes,
    diagnostics: DiagnosticSink | None = logger.trace,
) -> ForumTag:
    return decode_forum_tag(json_object_document(text), diagnostics)


def decode_forum_tags_json(
    text: str | bytes,
    diagnostics: DiagnosticSink | None = logger.trace,
) -> list[ForumTag]:
    return [decode_forum_tag(document, diagnostics) for document in json_array_documents(text)]
