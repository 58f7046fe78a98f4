"""Builds tag rules from plain mappings (e.g. a decoded JSON rules file)."""

from collections.abc import Mapping, Sequence
from typing import Any

from filekit.tabular.exceptions import RuleValidationError
from filekit.tabular.models import NonEmptyRule, StaticRule, TagRule, ValueMatchRule

_KIND_KEYS = ("type", "kind")
_MATCH_VALUE_KEYS = ("value", "matchValue", "match_value")
_VALID_KINDS = frozenset({"static", "non_empty", "value_match"})


def default_rules() -> list[TagRule]:
    """Rule list offered to a rule author before any editing: one blank static rule."""
    return [StaticRule(tag="")]


def build_rules(data: Sequence[Any]) -> list[TagRule]:
    """Build an ordered rule list.

    Only the record shape is validated here. Partially filled rules are kept
    as they are and stay inert during evaluation.

    Raises:
        RuleValidationError: on a non-object record, an unknown kind or a
            field of the wrong type.
    """
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise RuleValidationError("Rules must be a list")
    return [_build_rule(item, index) for index, item in enumerate(data)]


def _build_rule(raw: Any, index: int) -> TagRule:
    if not isinstance(raw, Mapping):
        raise RuleValidationError(f"Rule at index {index} must be an object")
    kind = _first_present(raw, _KIND_KEYS)
    if kind not in _VALID_KINDS:
        raise RuleValidationError(
            f"Rule at index {index}: 'type' must be one of {sorted(_VALID_KINDS)}, got {kind!r}"
        )
    tag = _optional_str(raw.get("tag"), "tag", index) or ""
    rule_id = _optional_str(raw.get("id"), "id", index)
    extra: dict[str, str] = {"id": rule_id} if rule_id else {}

    if kind == "static":
        return StaticRule(tag=tag, **extra)
    column = _optional_str(raw.get("column"), "column", index)
    if kind == "non_empty":
        return NonEmptyRule(tag=tag, column=column, **extra)
    match_value = _optional_str(_first_present(raw, _MATCH_VALUE_KEYS), "value", index)
    return ValueMatchRule(tag=tag, column=column, match_value=match_value, **extra)


def _first_present(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _optional_str(value: Any, name: str, index: int) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise RuleValidationError(f"Rule at index {index}: '{name}' must be a string")
    return value
