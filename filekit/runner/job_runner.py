import asyncio
from collections.abc import Awaitable, Callable

from filekit.image.exceptions import ImageProcessingError
from filekit.logging.logger import Log
from filekit.pdf.exceptions import PdfMergeError
from filekit.tabular.exceptions import TabularError

Job = Callable[[], Awaitable[None]]


class JobRunner:
    """Run one operation to completion and report a single terminal outcome.

    There are no retries: re-running a failed job is up to the caller.
    """

    HANDLED_ERRORS: tuple[type[Exception], ...] = (
        TabularError,
        PdfMergeError,
        ImageProcessingError,
        OSError,
        ValueError,
    )

    def run(self, name: str, job: Job) -> bool:
        """Execute ``job``; return True on success, False on a handled failure."""
        Log.info(f"Running {name}")
        try:
            with Log.timed(name):
                asyncio.run(job())
        except self.HANDLED_ERRORS as exc:
            Log.error(f"{name} failed: {exc}")
            return False
        return True
