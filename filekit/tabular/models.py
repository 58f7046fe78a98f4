import uuid
from dataclasses import dataclass, field

RawRow = dict[str, str]

OUTPUT_COLUMNS: tuple[str, ...] = ("userId", "firstName", "lastName", "email", "phone", "tags")
TAG_SEPARATOR = ", "


def _new_rule_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class StaticRule:
    """Always contributes its tag."""

    kind: str = "static"
    tag: str = ""
    id: str = field(default_factory=_new_rule_id)


@dataclass(frozen=True)
class NonEmptyRule:
    """Contributes its tag when ``column`` holds a non-blank value."""

    kind: str = "non_empty"
    tag: str = ""
    column: str | None = None
    id: str = field(default_factory=_new_rule_id)


@dataclass(frozen=True)
class ValueMatchRule:
    """Contributes its tag when ``column`` contains ``match_value``, ignoring case."""

    kind: str = "value_match"
    tag: str = ""
    column: str | None = None
    match_value: str | None = None
    id: str = field(default_factory=_new_rule_id)


TagRule = StaticRule | NonEmptyRule | ValueMatchRule


@dataclass(frozen=True)
class ProcessedRow:
    """One normalized output record."""

    user_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    tags: str = ""

    def as_record(self) -> dict[str, str]:
        values = (self.user_id, self.first_name, self.last_name, self.email, self.phone, self.tags)
        return dict(zip(OUTPUT_COLUMNS, values))
