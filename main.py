import sys
from pathlib import Path

from forumkit.decoding.errors import DecodeError
from forumkit.decoding.forum_tag_decoder import decode_forum_tag_json, decode_forum_tags_json
from forumkit.models.forum_tag import ForumTag
from forumkit.utils.logger import logger
from forumkit.utils.settings import settings


def decode_file(path: Path) -> list[ForumTag]:
    text = path.read_text(encoding="utf-8")

    if text.lstrip().startswith("["):
        return decode_forum_tags_json(text)

    return [decode_forum_tag_json(text)]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        logger.error("Usage: main.py <forum-tags.json>")
        return 2

    logger.log_settings(settings)

    path = Path(args[0]).expanduser()
    logger.debug(f'Decoding forum tags from "{path}"...')

    try:
        tags = decode_file(path)
    except OSError as e:
        logger.error(f'Unable to read "{path}": {e}')
        return 1
    except DecodeError as e:
        logger.error(f'Unable to decode "{path}": {e}')
        return 1

    logger.info(f'Decoded "{len(tags)}" forum tags...')

    for tag in tags:
        moderated = " (moderated)" if tag.moderated else ""
        emoji = (tag.emoji_name or f"<:{tag.emoji_id}>") if tag.has_emoji else "-"
        logger.info(f'- "{tag.name}" id={tag.id} emoji={emoji}{moderated}')

    return 0


if __name__ == "__main__":
    sys.exit(main())
