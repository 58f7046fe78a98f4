from dataclasses import dataclass


@dataclass(frozen=True)
class InputFile:
    """An in-memory blob handed over by the file-selection side."""

    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class OutputFile:
    """A finished result ready to be persisted under ``name``."""

    name: str
    data: bytes
