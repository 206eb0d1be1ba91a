import json
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from forumkit.decoding.errors import InvalidKey, InvalidValue, MalformedDocument
from forumkit.decoding.wire_value import WireObject, unwrap

DiagnosticSink = Callable[[str], None]


class MapDocument(Protocol):
    """Self-describing key/value document consumed once, left to right.

    ``next_key`` returns ``None`` once every key has been consumed. After a key
    is returned (or rejected with ``InvalidKey``) exactly one of the value
    methods must be called before asking for the next key.
    """

    def next_key(self) -> str | None: ...

    def next_value(self, value_type: Any) -> Any: ...

    def next_raw_value(self) -> object: ...

    def skip_value(self) -> None: ...


def _adapter_for(value_type: Any) -> TypeAdapter:
    if isinstance(value_type, TypeAdapter):
        return value_type

    return TypeAdapter(value_type)


class PairsDocument:
    def __init__(self, pairs: Iterable[tuple[object, object]]) -> None:
        self._pairs: tuple[tuple[object, object], ...] = tuple(pairs)
        self._index = 0
        self._current_key: str | None = None
        self._value_pending = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, object]) -> "PairsDocument":
        return cls(mapping.items())

    @classmethod
    def from_wire_object(cls, obj: WireObject) -> "PairsDocument":
        return cls(obj.pairs)

    def next_key(self) -> str | None:
        if self._value_pending:
            raise RuntimeError("next_key called before the pending value was consumed")

        if self._index >= len(self._pairs):
            return None

        key, _ = self._pairs[self._index]
        self._value_pending = True

        if not isinstance(key, str):
            self._current_key = None
            raise InvalidKey(key)

        self._current_key = key
        return key

    def _take(self) -> object:
        if not self._value_pending:
            raise RuntimeError("no pending value, call next_key first")

        _, value = self._pairs[self._index]
        self._index += 1
        self._value_pending = False
        return value

    def next_raw_value(self) -> object:
        return self._take()

    def next_value(self, value_type: Any) -> Any:
        field = self._current_key
        value = unwrap(self._take())

        try:
            return _adapter_for(value_type).validate_python(value)
        except ValidationError as e:
            reason = "; ".join(error["msg"] for error in e.errors())
            raise InvalidValue(field, reason) from e

    def skip_value(self) -> None:
        self._take()


def parse_json(text: str | bytes) -> object:
    try:
        return json.loads(text, object_pairs_hook=lambda pairs: WireObject(tuple(pairs)))
    except json.JSONDecodeError as e:
        raise MalformedDocument(str(e)) from e


def json_object_document(text: str | bytes) -> PairsDocument:
    value = parse_json(text)
    if not isinstance(value, WireObject):
        raise MalformedDocument(f"expected a JSON object, got {type(value).__name__}")

    return PairsDocument.from_wire_object(value)


def json_array_documents(text: str | bytes) -> list[PairsDocument]:
    value = parse_json(text)
    if not isinstance(value, list):
        raise MalformedDocument(f"expected a JSON array, got {type(value).__name__}")

    documents: list[PairsDocument] = []
    for position, item in enumerate(value):
        if not isinstance(item, WireObject):
            raise MalformedDocument(
                f"expected a JSON object at index {position}, got {type(item).__name__}"
            )
        documents.append(PairsDocument.from_wire_object(item))

    return documents
