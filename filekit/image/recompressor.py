import asyncio
from collections.abc import AsyncIterator, Callable, Sequence
from pathlib import PurePath

from filekit.config.settings import Settings
from filekit.files.models import InputFile, OutputFile
from filekit.image.base import BaseImageCodec
from filekit.image.formats import ImageFormat
from filekit.image.pillow_codec import PillowCodec
from filekit.image.size_search import SearchParams, fit_to_budget
from filekit.logging.logger import Log

DEFAULT_TARGET_SIZE_BYTES = 5 * 1024 * 1024

CodecFactory = Callable[[bytes, ImageFormat, str], BaseImageCodec]


def output_name(source_name: str, fmt: ImageFormat) -> str:
    """Source base name with the target format's extension."""
    return f"{PurePath(source_name).stem}.{fmt.extension}"


class ImageRecompressor:
    """Re-encodes images into a target format under a byte budget."""

    def __init__(
        self,
        target_size_bytes: int = DEFAULT_TARGET_SIZE_BYTES,
        params: SearchParams | None = None,
        codec_factory: CodecFactory = PillowCodec.decode,
    ) -> None:
        self._target_size_bytes = target_size_bytes
        self._params = params or SearchParams()
        self._codec_factory = codec_factory

    def recompress(
        self,
        file: InputFile,
        fmt: ImageFormat,
        byte_budget: int | None = None,
    ) -> OutputFile:
        """Recompress one image.

        Raises:
            DecodeError: if ``file`` is not a readable image.
            EncodeError: if the target codec fails.
        """
        budget = byte_budget if byte_budget is not None else self._target_size_bytes
        codec = self._codec_factory(file.data, fmt, file.name)
        outcome = fit_to_budget(codec, budget, lossless=fmt.lossless, params=self._params)

        name = output_name(file.name, fmt)
        if outcome.size > budget:
            Log.warning(f"'{name}' is {outcome.size} bytes, over the {budget} byte budget")
        Log.info(
            f"Recompressed '{file.name}' -> '{name}': {file.size} -> {outcome.size} bytes "
            f"(quality={outcome.quality:.2f}, scale={outcome.scale:.3f}, "
            f"encodes={outcome.encode_calls})"
        )
        return OutputFile(name=name, data=outcome.data)

    async def recompress_batch(
        self,
        files: Sequence[InputFile],
        fmt: ImageFormat,
        byte_budget: int | None = None,
    ) -> AsyncIterator[OutputFile]:
        """Yield one output per input, strictly one image at a time.

        Each output is yielded before the next image starts, so a failure
        leaves earlier outputs with the caller.
        """
        for file in files:
            yield await asyncio.to_thread(self.recompress, file, fmt, byte_budget)


def build_recompressor(settings: Settings) -> ImageRecompressor:
    """Build an ImageRecompressor from application settings."""
    params = SearchParams(
        safety_margin=settings.image_safety_margin,
        min_quality=settings.image_min_quality,
        max_quality=settings.image_max_quality,
        iterations=settings.image_search_iterations,
        acceptance_ratio=settings.image_acceptance_ratio,
    )
    return ImageRecompressor(target_size_bytes=settings.image_target_size_bytes, params=params)
