from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ForumTag:
    """Tag that can be applied to a thread in a forum channel.

    At most one of ``emoji_id`` and ``emoji_name`` is set. ``moderated`` tags
    can only be added or removed by members allowed to manage threads.
    """
    id: int
    name: str
    moderated: bool
    emoji_id: int | None = None
    emoji_name: str | None = None

    @property
    def has_emoji(self) -> bool:
        return self.emoji_id is not None or self.emoji_name is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "emoji_id": self.emoji_id,
            "emoji_name": self.emoji_name,
            "id": str(self.id),
            "moderated": self.moderated,
            "name": self.name,
        }
