"""Declarative validation of request dataclasses."""

from __future__ import annotations

import dataclasses
from collections.abc import Sized
from dataclasses import dataclass
from typing import Any

_RULE_KEY = "bankledger.validation"

_MESSAGES = {
    "required": "{0} must not be empty.",
    "gt": "{0} must be greater than {1}",
    "len": "{0} must be greater than {1} length",
}


@dataclass(frozen=True)
class _Rule:
    name: str | None
    required: bool
    gt: int | None
    length: int | None


def rule(
    json_name: str,
    *,
    required: bool = False,
    gt: int | None = None,
    length: int | None = None,
) -> dict[str, Any]:
    """Return field metadata describing how a dataclass field is validated.

    ``json_name`` is the name used in messages; ``"-"`` falls back to the
    attribute name.
    """
    name = None if json_name in ("", "-") else json_name
    return {_RULE_KEY: _Rule(name, required, gt, length)}


class ValidationError(ValueError):
    """Raised when one or more fields fail validation."""

    def __init__(self, messages: list[str] | tuple[str, ...]) -> None:
        self.messages = tuple(messages)
        super().__init__("\n".join(self.messages))


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _measure(value: Any) -> Any:
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, Sized):
        return len(value)
    return value


class Validator:
    """Checks dataclass instances against the rules in their field metadata."""

    def __init__(self) -> None:
        self.translations = dict(_MESSAGES)

    def validate(self, obj: Any) -> Any:
        """Return ``obj`` if valid; raise ValidationError listing every failure."""
        if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
            raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
        messages = [
            message
            for f in dataclasses.fields(obj)
            if (field_rule := f.metadata.get(_RULE_KEY)) is not None
            and (message := self._check(field_rule, f.name, getattr(obj, f.name))) is not None
        ]
        if messages:
            raise ValidationError(messages)
        return obj

    def _check(self, field_rule: _Rule, attribute: str, value: Any) -> str | None:
        name = field_rule.name or attribute
        if field_rule.required and _is_zero(value):
            return self.translations["required"].format(name)
        if field_rule.gt is not None and not _measure(value) > field_rule.gt:
            return self.translations["gt"].format(name, field_rule.gt)
        if field_rule.length is not None and _measure(value) != field_rule.length:
            return self.translations["len"].format(name, field_rule.length)
        return None