from filekit.config.settings import Settings
from filekit.pdf.base import BasePdfMerger
from filekit.pdf.pymupdf_adapter import PyMuPdfMerger
from filekit.pdf.pypdf_adapter import PypdfMerger


class PdfMergerFactory:
    """Picks the PDF merge adapter by engine name."""

    ADAPTERS: dict[str, type[BasePdfMerger]] = {
        "pymupdf": PyMuPdfMerger,
        "pypdf": PypdfMerger,
    }

    @classmethod
    def engines(cls) -> list[str]:
        return sorted(cls.ADAPTERS)

    @classmethod
    def for_engine(cls, engine: str) -> BasePdfMerger:
        """Instantiate the adapter registered under ``engine`` (case-insensitive).

        Raises:
            ValueError: if no adapter is registered under that name.
        """
        adapter_cls = cls.ADAPTERS.get(engine.strip().lower())
        if adapter_cls is None:
            raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {cls.engines()}")
        return adapter_cls()

    @classmethod
    def create(cls, settings: Settings) -> BasePdfMerger:
        return cls.for_engine(settings.pdf_engine)
