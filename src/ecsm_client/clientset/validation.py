"""Client-side payload checks.

These run before a request is built so that payloads the server would
reject never leave the process. Every check raises
:class:`~ecsm_client.errors.ValidationError`.
"""

import enum
from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

import structlog

from ..errors import ValidationError

logger = structlog.get_logger(__name__)


class ConfigItemType(str, enum.Enum):
    """Declared type of a config item value."""

    STRING = "string"
    NUMBER = "number"
    JSON = "json"


ALLOWED_CONFIG_TYPES = tuple(t.value for t in ConfigItemType)


def _reject(msg: str, **context: Any) -> ValidationError:
    logger.warning("Rejected payload", reason=msg, **context)
    return ValidationError(msg)


def _kind(value: Any) -> str:
    return type(value).__name__


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a number on the wire
    return isinstance(value, int | float) and not isinstance(value, bool)


def _is_json_container(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def check_typed_value(declared_type: Any, raw_value: Any) -> ConfigItemType:
    """Check that ``raw_value`` has the shape ``declared_type`` announces.

    - ``string``: a ``str``.
    - ``number``: an ``int`` or ``float`` (not ``bool``).
    - ``json``: a mapping or a list-like sequence, never a scalar.

    Returns:
        The declared type as a :class:`ConfigItemType`.

    Raises:
        ValidationError: On a mismatch or an unsupported declared type.
    """
    try:
        config_type = ConfigItemType(declared_type)
    except ValueError:
        msg = (
            f"unsupported config type: '{declared_type}'. "
            f"Must be one of: {', '.join(ALLOWED_CONFIG_TYPES)}"
        )
        raise _reject(msg, declared_type=str(declared_type)) from None

    if config_type is ConfigItemType.STRING:
        ok = isinstance(raw_value, str)
        expected = "a string"
    elif config_type is ConfigItemType.NUMBER:
        ok = _is_number(raw_value)
        expected = "a number"
    else:
        ok = _is_json_container(raw_value)
        expected = "a map or list"

    if not ok:
        msg = (
            f"type mismatch: expected {config_type.value} ({expected}), "
            f"got value of type {_kind(raw_value)}"
        )
        raise _reject(msg, declared_type=config_type.value, value_kind=_kind(raw_value))
    return config_type


@dataclass(frozen=True)
class StringValue:
    value: str

    type = ConfigItemType.STRING


@dataclass(frozen=True)
class NumberValue:
    value: int | float

    type = ConfigItemType.NUMBER


@dataclass(frozen=True)
class JsonValue:
    value: Mapping[str, Any] | list[Any]

    type = ConfigItemType.JSON


TypedValue: TypeAlias = StringValue | NumberValue | JsonValue

_VALUE_CLASSES: dict[ConfigItemType, type] = {
    ConfigItemType.STRING: StringValue,
    ConfigItemType.NUMBER: NumberValue,
    ConfigItemType.JSON: JsonValue,
}


def decode_typed_value(declared_type: Any, raw_value: Any) -> TypedValue:
    """Build the typed variant for ``raw_value`` after checking it."""
    config_type = check_typed_value(declared_type, raw_value)
    return _VALUE_CLASSES[config_type](raw_value)


def check_identity(path_id: str, body_id: str, kind: str) -> None:
    """Require the identifier in the path to match the one in the body."""
    if path_id != body_id:
        msg = f"{kind} ID in path ({path_id}) does not match {kind} ID in body ({body_id})"
        raise _reject(msg, path_id=path_id, body_id=body_id)


def check_action(action: str, allowed: Collection[str]) -> None:
    """Require ``action`` to be one of a closed set of verbs."""
    if action not in allowed:
        msg = f"invalid action: '{action}', must be one of [{', '.join(allowed)}]"
        raise _reject(msg, action=action)


def check_load_balance(strategy: str, details: Sequence[Any] | None, paired_mode: str) -> None:
    """Require load-balance details exactly when ``paired_mode`` is selected."""
    if strategy != paired_mode and details:
        msg = (
            f"validation failed: loadBalanceDetail can only be set when loadBalance "
            f"strategy is '{paired_mode}', but the strategy was '{strategy}'"
        )
        raise _reject(msg, load_balance=strategy)
    if strategy == paired_mode and not details:
        msg = (
            f"validation failed: loadBalanceDetail must be provided when "
            f"loadBalance strategy is '{paired_mode}'"
        )
        raise _reject(msg, load_balance=strategy)


def check_required_per_item(items: Iterable[Any], attr: str, operation: str) -> None:
    """Require every batch entry to carry ``attr``; the error names the index."""
    for index, item in enumerate(items):
        if not getattr(item, attr):
            msg = f"{attr} is required for {operation} at index {index}"
            raise _reject(msg, operation=operation, index=index)
