from typing import Optional

from pydantic import StrictStr, TypeAdapter

from forumkit.decoding.document import DiagnosticSink, MapDocument, json_object_document
from forumkit.decoding.errors import DuplicateField, InvalidKey
from forumkit.models.default_reaction import DefaultReaction
from forumkit.models.snowflake import Snowflake
from forumkit.utils.logger import logger

_UNSET = object()

_EMOJI_ID = TypeAdapter(Optional[Snowflake])
_EMOJI_NAME = TypeAdapter(Optional[StrictStr])


def decode_default_reaction(
    document: MapDocument,
    diagnostics: DiagnosticSink | None = logger.trace,
) -> DefaultReaction:
    emoji_id: object = _UNSET
    emoji_name: object = _UNSET

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

        if key == "emoji_id":
            if emoji_id is not _UNSET:
                raise DuplicateField("emoji_id")
            emoji_id = document.next_value(_EMOJI_ID)
        elif key == "emoji_name":
            if emoji_name is not _UNSET:
                raise DuplicateField("emoji_name")
            emoji_name = document.next_value(_EMOJI_NAME)
        else:
            document.skip_value()
            if diagnostics is not None:
                diagnostics(f'ran into an unknown key: "{key}"')

    return DefaultReaction(
        emoji_id=None if emoji_id is _UNSET else emoji_id,  # type: ignore[arg-type]
        emoji_name=None if emoji_name is _UNSET else emoji_name,  # type: ignore[arg-type]
    )


def decode_default_reaction_json(
    text: str | bytes,
    diagnostics: DiagnosticSink | None = logger.trace,
) -> DefaultReaction:
    return decode_default_reaction(json_object_document(text), diagnostics)
