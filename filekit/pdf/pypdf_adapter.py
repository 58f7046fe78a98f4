import io
from collections.abc import Sequence

from pypdf import PdfReader, PdfWriter

from filekit.files.models import InputFile
from filekit.pdf.base import BasePdfMerger
from filekit.pdf.exceptions import LoadError, PdfMergeError
from filekit.pdf.models import MergedDocument


class PypdfMerger(BasePdfMerger):
    """Merges PDFs using pypdf."""

    def merge(self, documents: Sequence[InputFile]) -> MergedDocument:
        writer = PdfWriter()
        for index, document in enumerate(documents):
            reader = self._load(index, document)
            try:
                for page in reader.pages:
                    writer.add_page(page)
            except Exception as exc:
                raise LoadError(index, document.name, str(exc)) from exc

        buffer = io.BytesIO()
        try:
            writer.write(buffer)
        except Exception as exc:
            raise PdfMergeError(f"pypdf could not write merged document: {exc}") from exc
        return MergedDocument(data=buffer.getvalue(), page_count=len(writer.pages))

    @staticmethod
    def _load(index: int, document: InputFile) -> PdfReader:
        try:
            reader = PdfReader(io.BytesIO(document.data))
            if reader.is_encrypted:
                raise LoadError(index, document.name, "document is password protected")
            _ = len(reader.pages)
        except LoadError:
            raise
        except Exception as exc:
            raise LoadError(index, document.name, str(exc)) from exc
        return reader
