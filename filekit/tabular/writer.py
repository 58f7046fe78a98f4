import csv
import io
from collections.abc import Iterable

from filekit.tabular.models import OUTPUT_COLUMNS, ProcessedRow


def serialize_rows(rows: Iterable[ProcessedRow]) -> bytes:
    """Serialize rows as UTF-8 CSV with the fixed export header."""
    buffer = io.StringIO(newline="")
    writer = csv.DictWriter(buffer, fieldnames=OUTPUT_COLUMNS, lineterminator="\r\n")
    writer.writeheader()
    writer.writerows(row.as_record() for row in rows)
    return buffer.getvalue().encode("utf-8")
