"""Normalizers turning generated values into comparable representations."""

import dataclasses
import enum
import hashlib
import inspect
import json
from collections.abc import Callable

Stringifier = Callable[[object], object]


def stringify(value: object) -> str:
    """Serialize a value to a stable string representation.

    Args:
        value: Value to serialize

    Returns:
        Compact JSON text; equal values always produce the same text

    Scalars and lists serialize as plain JSON (tuples like lists, whole
    floats like ints). Dicts, sets and other objects become single-key
    JSON objects tagged with their kind, so they can't collide with each
    other or with strings. Dict entries and set members are sorted, and
    objects serialize their attributes rather than their identity.
    """
    return _dumps(_to_jsonable(value))


def identity(value: object) -> object:
    """Compare and store values as they are (they must be hashable)."""
    return value


def digest(value: object) -> str:
    """SHA-256 of the stringified value, for large structured results."""
    return hashlib.sha256(stringify(value).encode()).hexdigest()


def resolve_stringifier(stringifier: Stringifier | None) -> Stringifier:
    """Treat a missing stringifier as direct equality."""
    if stringifier is None:
        return identity
    if not callable(stringifier):
        raise TypeError(
            f"stringifier must be callable, got {type(stringifier).__name__}"
        )
    return stringifier


def _to_jsonable(value: object) -> object:
    # Handle common types directly
    if isinstance(value, (str, int, bool, type(None))):
        return value

    # 1.0 == 1, so both serialize as 1
    if isinstance(value, float):
        return int(value) if value.is_integer() else value

    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]

    if isinstance(value, dict):
        return {"dict": _entries(value)}

    # Sets have no order, sort by their serialized members
    if isinstance(value, (set, frozenset)):
        return {"set": sorted((_to_jsonable(v) for v in value), key=_dumps)}

    if isinstance(value, enum.Enum):
        return {"enum": [_type_name(type(value)), value.name]}

    if isinstance(value, type) or inspect.isroutine(value):
        return {"callable": _type_name(value)}

    state = _state(value)
    if state is not None:
        return {"object": [_type_name(type(value)), _entries(state)]}

    # No attributes to compare, e.g. Decimal or datetime
    return {"repr": [_type_name(type(value)), repr(value)]}


def _entries(mapping: dict) -> list[list[object]]:
    """Key/value pairs sorted by serialized key; keys keep their type."""
    pairs = [[_to_jsonable(k), _to_jsonable(v)] for k, v in mapping.items()]
    return sorted(pairs, key=lambda pair: _dumps(pair[0]))


def _state(value: object) -> dict[str, object] | None:
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}

    state: dict[str, object] = {}
    for cls in type(value).__mro__:
        for name in _slot_names(cls):
            if hasattr(value, name):
                state[name] = getattr(value, name)

    if hasattr(value, "__dict__"):
        state.update(vars(value))
    elif not any(_slot_names(c) for c in type(value).__mro__):
        return None

    return state


def _slot_names(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [name for name in slots if name not in ("__dict__", "__weakref__")]


def _type_name(obj: object) -> str:
    module = getattr(obj, "__module__", None) or ""
    name = getattr(obj, "__qualname__", None) or repr(obj)
    return f"{module}.{name}"


def _dumps(jsonable: object) -> str:
    return json.dumps(jsonable, sort_keys=True, separators=(",", ":"))
