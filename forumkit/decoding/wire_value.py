from dataclasses import dataclass

from forumkit.models.snowflake import SNOWFLAKE_MAX


# Raw wire shapes a value can take before typed extraction. Plain Python
# scalars (int, str, bool, float, None) and lists stand for themselves.

@dataclass(slots=True, frozen=True)
class Some:
    value: object


@dataclass(slots=True, frozen=True)
class Newtype:
    name: str
    value: object


@dataclass(slots=True, frozen=True)
class WireObject:
    pairs: tuple[tuple[object, object], ...]


def unwrap(value: object) -> object:
    while isinstance(value, (Some, Newtype)):
        value = value.value

    return value


def _parse_unsigned(text: str) -> int | None:
    if not (text.isascii() and text.isdigit()):
        return None

    return int(text)


def resolve_optional_snowflake(raw: object) -> int | None:
    match raw:
        case bool():
            candidate = None
        case int(value) if value >= 0:
            candidate = value
        case Some(Newtype(value=str(text))):
            candidate = _parse_unsigned(text)
        case _:
            candidate = None

    # zero is the "unset" sentinel for optional ids
    if candidate is None or candidate == 0 or candidate > SNOWFLAKE_MAX:
        return None

    return candidate
