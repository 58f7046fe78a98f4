from dataclasses import dataclass


@dataclass(frozen=True)
class MergedDocument:
    """Serialized output of a merge."""

    data: bytes
    page_count: int
