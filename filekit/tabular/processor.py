import asyncio
from collections.abc import Sequence

from filekit.config.settings import Settings
from filekit.files.models import InputFile, OutputFile
from filekit.logging.logger import Log
from filekit.tabular.columns import ColumnRole, resolve_columns
from filekit.tabular.exceptions import EmptyResultError
from filekit.tabular.models import ProcessedRow, RawRow, TagRule
from filekit.tabular.phone import normalize_phone
from filekit.tabular.reader import parse_table
from filekit.tabular.rule_evaluator import evaluate_tags
from filekit.tabular.writer import serialize_rows

DEFAULT_OUTPUT_FILENAME = "Momence Customers - YM Segment.csv"

_RESOLVED_ROLES = (
    ColumnRole.FIRST_NAME,
    ColumnRole.LAST_NAME,
    ColumnRole.EMAIL,
    ColumnRole.PHONE,
)


class TabularProcessor:
    """Normalizes and tags a batch of tabular files into one export.

    Files are parsed concurrently; rows are reassembled by file index so the
    export always follows submission order.
    """

    def __init__(self, output_filename: str = DEFAULT_OUTPUT_FILENAME) -> None:
        self._output_filename = output_filename

    async def process(
        self,
        files: Sequence[InputFile],
        rules: Sequence[TagRule],
    ) -> OutputFile:
        """Build the combined export.

        Raises:
            ParseError: if any file is not valid delimited text.
            EmptyResultError: if no row in any file has a phone value.
        """
        slots: list[list[ProcessedRow]] = [[] for _ in files]

        async def fill_slot(index: int, file: InputFile) -> None:
            slots[index] = await asyncio.to_thread(self.process_file, file, rules)

        await asyncio.gather(*(fill_slot(i, file) for i, file in enumerate(files)))

        rows = [row for slot in slots for row in slot]
        if not rows:
            raise EmptyResultError("No valid rows found after processing.")

        Log.info(f"Tabular export: {len(rows)} rows from {len(files)} files")
        return OutputFile(name=self._output_filename, data=serialize_rows(rows))

    def process_file(self, file: InputFile, rules: Sequence[TagRule]) -> list[ProcessedRow]:
        """Normalize and tag the rows of one file, dropping rows without a phone."""
        table = parse_table(file)
        columns = resolve_columns(table.headers, _RESOLVED_ROLES)
        if columns[ColumnRole.PHONE] is None:
            Log.warning(f"'{file.name}': no phone column among {table.headers}")

        rows: list[ProcessedRow] = []
        for raw in table.rows:
            phone = _cell(raw, columns[ColumnRole.PHONE])
            if not phone:
                continue
            normalized = normalize_phone(phone)
            rows.append(
                ProcessedRow(
                    user_id=normalized,
                    first_name=_cell(raw, columns[ColumnRole.FIRST_NAME]),
                    last_name=_cell(raw, columns[ColumnRole.LAST_NAME]),
                    email=_cell(raw, columns[ColumnRole.EMAIL]),
                    phone=normalized,
                    tags=evaluate_tags(raw, rules),
                )
            )
        Log.debug(f"'{file.name}': kept {len(rows)} of {len(table.rows)} rows")
        return rows


def _cell(row: RawRow, column: str | None) -> str:
    if column is None:
        return ""
    return (row.get(column) or "").strip()


def build_tabular_processor(settings: Settings) -> TabularProcessor:
    """Build a TabularProcessor from application settings."""
    return TabularProcessor(output_filename=settings.tabular_output_filename)
