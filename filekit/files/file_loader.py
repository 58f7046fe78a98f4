from collections.abc import Iterable
from pathlib import Path

from filekit.files.models import InputFile


class FileLoader:
    """Reads files from disk into in-memory blobs."""

    def load(self, path: Path) -> InputFile:
        """Read one file.

        Raises:
            FileNotFoundError: if nothing exists at ``path``.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return InputFile(name=path.name, data=path.read_bytes())

    def load_many(self, paths: Iterable[Path]) -> list[InputFile]:
        return [self.load(path) for path in paths]
