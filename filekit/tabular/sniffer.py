from collections.abc import Sequence

from filekit.files.models import InputFile
from filekit.logging.logger import Log
from filekit.tabular.reader import read_headers


def sniff_headers(file: InputFile) -> list[str]:
    """Return the header set of one tabular file, in file order."""
    return read_headers(file)


def sniff_columns(files: Sequence[InputFile]) -> list[str]:
    """Return the ordered union of header names across ``files``.

    Names keep their first-seen position; no files yields an empty list.
    """
    columns: list[str] = []
    seen: set[str] = set()
    for file in files:
        for header in sniff_headers(file):
            if header not in seen:
                seen.add(header)
                columns.append(header)
    Log.debug(f"Sniffed {len(columns)} columns from {len(files)} files")
    return columns
