from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class DefaultReaction:
    """Emoji used as the default way to react to a forum post.

    Exactly one of ``emoji_id`` (custom guild emoji) and ``emoji_name``
    (Unicode emoji) is expected to be set.
    """
    emoji_id: int | None = None
    emoji_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "emoji_id": str(self.emoji_id) if self.emoji_id is not None else None,
            "emoji_name": self.emoji_name,
        }
