from collections.abc import Sequence

import pymupdf

from filekit.files.models import InputFile
from filekit.pdf.base import BasePdfMerger
from filekit.pdf.exceptions import LoadError, PdfMergeError
from filekit.pdf.models import MergedDocument


class PyMuPdfMerger(BasePdfMerger):
    """Merges PDFs using PyMuPDF."""

    def merge(self, documents: Sequence[InputFile]) -> MergedDocument:
        with pymupdf.open() as merged:  # type: ignore[no-untyped-call]
            for index, document in enumerate(documents):
                with self._load(index, document) as source:
                    try:
                        merged.insert_pdf(source)
                    except Exception as exc:
                        raise LoadError(index, document.name, str(exc)) from exc
            try:
                return MergedDocument(
                    data=merged.tobytes(garbage=3, deflate=True),
                    page_count=merged.page_count,
                )
            except Exception as exc:
                raise PdfMergeError(f"pymupdf could not write merged document: {exc}") from exc

    @staticmethod
    def _load(index: int, document: InputFile) -> pymupdf.Document:
        try:
            source = pymupdf.open(stream=document.data, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise LoadError(index, document.name, str(exc)) from exc
        if source.needs_pass:
            source.close()
            raise LoadError(index, document.name, "document is password protected")
        return source
