from typing import Annotated

from pydantic import BeforeValidator

SNOWFLAKE_MAX = 2**64 - 1


def parse_snowflake(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError("snowflake must be an integer or a digit string, got a boolean")

    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"snowflake string must only contain digits, got {value!r}")
        value = int(value)

    if not isinstance(value, int):
        raise ValueError(f"snowflake must be an integer or a digit string, got {type(value).__name__}")

    if not 0 < value <= SNOWFLAKE_MAX:
        raise ValueError(f"snowflake must be within 1..{SNOWFLAKE_MAX}, got {value}")

    return value


Snowflake = Annotated[int, BeforeValidator(parse_snowflake)]
