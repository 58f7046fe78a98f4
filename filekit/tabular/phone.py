import re

_SEPARATORS_RE = re.compile(r"[+\s\-()]")
_NON_DIGIT_RE = re.compile(r"\D")


def normalize_phone(raw: str) -> str:
    """Canonicalize a phone cell to digits only.

    Separators are dropped first. A remaining ``.`` is treated as a
    spreadsheet float artifact, so everything from the first dot on is
    discarded: ``"+1 (555) 123-4567.0"`` -> ``"15551234567"`` and
    ``"555.123.4567"`` -> ``"555"``.
    """
    if not raw:
        return ""
    cleaned = _SEPARATORS_RE.sub("", raw)
    if "." in cleaned:
        cleaned = cleaned.split(".", 1)[0]
    return _NON_DIGIT_RE.sub("", cleaned)
