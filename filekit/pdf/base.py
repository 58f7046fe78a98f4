from abc import ABC, abstractmethod
from collections.abc import Sequence

from filekit.files.models import InputFile
from filekit.pdf.models import MergedDocument


class BasePdfMerger(ABC):
    """Contract for all PDF merge adapters."""

    @abstractmethod
    def merge(self, documents: Sequence[InputFile]) -> MergedDocument:
        """Concatenate the pages of ``documents`` into one PDF.

        Args:
            documents: PDF blobs in output order.

        Returns:
            MergedDocument holding every page of document 1, then of
            document 2, and so on, each in its original order.

        Raises:
            LoadError: if any input is not a valid PDF.
            PdfMergeError: if the merged document cannot be written.
        """
