import asyncio
from collections.abc import Sequence

from filekit.config.settings import Settings
from filekit.files.models import InputFile, OutputFile
from filekit.logging.logger import Log
from filekit.pdf.base import BasePdfMerger
from filekit.pdf.exceptions import PdfMergeError
from filekit.pdf.factory import PdfMergerFactory

DEFAULT_OUTPUT_FILENAME = "Class Schedule.pdf"


class DocumentMerger:
    """Merges a batch of PDFs into one output file, all or nothing."""

    def __init__(
        self,
        engine: BasePdfMerger,
        output_filename: str = DEFAULT_OUTPUT_FILENAME,
    ) -> None:
        self._engine = engine
        self._output_filename = output_filename

    async def merge(self, files: Sequence[InputFile]) -> OutputFile:
        """Merge ``files`` in submission order.

        Raises:
            LoadError: naming the first input that is not a valid PDF.
            PdfMergeError: if no files are given or the output cannot be written.
        """
        if not files:
            raise PdfMergeError("No documents to merge")
        merged = await asyncio.to_thread(self._engine.merge, files)
        Log.info(
            f"Merged {len(files)} documents into {merged.page_count} pages "
            f"({len(merged.data)} bytes)"
        )
        return OutputFile(name=self._output_filename, data=merged.data)


def build_document_merger(settings: Settings) -> DocumentMerger:
    """Build a DocumentMerger with the configured engine."""
    return DocumentMerger(
        engine=PdfMergerFactory.create(settings),
        output_filename=settings.merged_document_filename,
    )
