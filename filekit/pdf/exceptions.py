class PdfMergeError(Exception):
    """Base exception for all document merge errors."""


class LoadError(PdfMergeError):
    """Raised when one input is not a loadable PDF document."""

    def __init__(self, index: int, filename: str, reason: str) -> None:
        super().__init__(f"Document {index + 1} ('{filename}') could not be loaded: {reason}")
        self.index = index
        self.filename = filename
