from collections.abc import Iterable, Mapping, Sequence
from enum import Enum


class ColumnRole(str, Enum):
    """Semantic column a tabular file may carry."""

    USER_ID = "userId"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE = "phone"


# Candidates are tried in order; the first one present in the header set wins.
COLUMN_ALIASES: Mapping[ColumnRole, tuple[str, ...]] = {
    ColumnRole.USER_ID: ("userId", "user id", "user_id", "id"),
    ColumnRole.FIRST_NAME: ("firstName", "first name", "first_name", "firstname"),
    ColumnRole.LAST_NAME: ("lastName", "last name", "last_name", "lastname"),
    ColumnRole.EMAIL: ("email", "e-mail", "email address"),
    ColumnRole.PHONE: ("phone", "phone number", "phonenumber", "phone_number", "mobile"),
}


def find_column(headers: Sequence[str], candidates: Iterable[str]) -> str | None:
    """Return the header matching the first candidate, compared case-insensitively.

    The returned value is the header exactly as it appears in the file so it
    can be used to index raw rows.
    """
    lowered = [header.strip().lower() for header in headers]
    for candidate in candidates:
        key = candidate.strip().lower()
        if key in lowered:
            return headers[lowered.index(key)]
    return None


def resolve_columns(
    headers: Sequence[str],
    roles: Iterable[ColumnRole] = tuple(ColumnRole),
    aliases: Mapping[ColumnRole, tuple[str, ...]] = COLUMN_ALIASES,
) -> dict[ColumnRole, str | None]:
    """Map each requested role to its header, or None when unresolved."""
    return {role: find_column(headers, aliases.get(role, ())) for role in roles}
