"""Evaluates declarative tag rules against a single raw row.

Evaluation never fails: a rule with a blank tag, a missing column or a
missing match value simply does not fire.
"""

from collections.abc import Callable, Sequence
from typing import Any

from filekit.tabular.models import (
    TAG_SEPARATOR,
    NonEmptyRule,
    RawRow,
    StaticRule,
    TagRule,
    ValueMatchRule,
)


def _static_fires(row: RawRow, rule: StaticRule) -> bool:
    return True


def _non_empty_fires(row: RawRow, rule: NonEmptyRule) -> bool:
    if not rule.column:
        return False
    return bool((row.get(rule.column) or "").strip())


def _value_match_fires(row: RawRow, rule: ValueMatchRule) -> bool:
    if not rule.column or not rule.match_value:
        return False
    needle = rule.match_value.strip().lower()
    cell = row.get(rule.column)
    if not needle or cell is None:
        return False
    return needle in cell.strip().lower()


_PREDICATES: dict[type, Callable[[RawRow, Any], bool]] = {
    StaticRule: _static_fires,
    NonEmptyRule: _non_empty_fires,
    ValueMatchRule: _value_match_fires,
}


def evaluate_tags(row: RawRow, rules: Sequence[TagRule]) -> str:
    """Return the tags fired by ``rules`` for ``row``, in rule order, joined by ", "."""
    emitted: list[str] = []
    for rule in rules:
        tag = (rule.tag or "").strip()
        if not tag:
            continue
        fires = _PREDICATES.get(type(rule))
        if fires is not None and fires(row, rule):
            emitted.append(tag)
    return TAG_SEPARATOR.join(emitted)
