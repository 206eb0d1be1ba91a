class DecodeError(Exception):
    pass


class DuplicateField(DecodeError):
    def __init__(self, field: str) -> None:
        super().__init__(f'duplicate field "{field}"')
        self.field = field


class MissingField(DecodeError):
    def __init__(self, field: str) -> None:
        super().__init__(f'missing field "{field}"')
        self.field = field


class InvalidValue(DecodeError):
    def __init__(self, field: str | None, reason: str) -> None:
        super().__init__(f'invalid value for field "{field}": {reason}')
        self.field = field
        self.reason = reason


class InvalidKey(DecodeError):
    def __init__(self, key: object) -> None:
        super().__init__(f"invalid key {key!r} ({type(key).__name__}), expected a string")
        self.key = key


class MalformedDocument(DecodeError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"malformed document: {reason}")
        self.reason = reason
