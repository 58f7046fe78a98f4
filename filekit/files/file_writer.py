from pathlib import Path

from filekit.files.models import OutputFile
from filekit.logging.logger import Log


class FileWriter:
    """Persists finished outputs into a target directory."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def write(self, output: OutputFile) -> Path:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self._output_dir / output.name
        path.write_bytes(output.data)
        Log.info(f"Wrote {len(output.data)} bytes to {path}")
        return path
