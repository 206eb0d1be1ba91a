import discord

from forumkit.decoding.document import DiagnosticSink, PairsDocument
from forumkit.decoding.forum_tag_decoder import decode_forum_tag
from forumkit.models.default_reaction import DefaultReaction
from forumkit.models.forum_tag import ForumTag
from forumkit.utils.logger import logger


def _partial_emoji(emoji_id: int | None, emoji_name: str | None) -> discord.PartialEmoji | None:
    if emoji_id is None and emoji_name is None:
        return None

    return discord.PartialEmoji(name=emoji_name or "", id=emoji_id)


def to_partial_emoji(reaction: DefaultReaction) -> discord.PartialEmoji | None:
    return _partial_emoji(reaction.emoji_id, reaction.emoji_name)


def to_discord_forum_tag(tag: ForumTag) -> discord.ForumTag:
    result = discord.ForumTag(
        name=tag.name,
        emoji=_partial_emoji(tag.emoji_id, tag.emoji_name),
        moderated=tag.moderated,
    )
    result.id = tag.id
    return result


# unsaved discord.py tags carry id 0 and are rejected as missing an id
def from_discord_forum_tag(
    tag: discord.ForumTag,
    diagnostics: DiagnosticSink | None = logger.trace,
) -> ForumTag:
    return decode_forum_tag(PairsDocument.from_mapping(tag.to_dict()), diagnostics)
