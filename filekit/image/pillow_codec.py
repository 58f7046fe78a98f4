import io

from PIL import Image, ImageOps

from filekit.image.base import BaseImageCodec
from filekit.image.exceptions import DecodeError, EncodeError
from filekit.image.formats import ImageFormat

_PNG_COMPRESS_LEVEL = 9


class PillowCodec(BaseImageCodec):
    """Encodes a Pillow surface to the requested format."""

    def __init__(self, surface: Image.Image, fmt: ImageFormat) -> None:
        self._surface = surface
        self._format = fmt

    @classmethod
    def decode(cls, data: bytes, fmt: ImageFormat, name: str = "") -> "PillowCodec":
        """Decode ``data`` at native resolution, honoring EXIF orientation.

        Raises:
            DecodeError: if the bytes are not a readable image.
        """
        mode = "RGB" if fmt is ImageFormat.JPEG else "RGBA"
        try:
            with Image.open(io.BytesIO(data)) as image:
                surface = ImageOps.exif_transpose(image).convert(mode)
        except Exception as exc:
            raise DecodeError(f"Cannot decode image '{name}': {exc}") from exc
        return cls(surface, fmt)

    @property
    def dimensions(self) -> tuple[int, int]:
        return self._surface.size

    def encode(self, quality: float, scale: float = 1.0) -> bytes:
        surface = self._surface
        if scale != 1.0:
            width, height = self.dimensions
            size = (max(1, round(width * scale)), max(1, round(height * scale)))
            surface = surface.resize(size, Image.Resampling.LANCZOS)

        buffer = io.BytesIO()
        try:
            surface.save(buffer, format=self._format.pillow_format, **self._save_options(quality))
        except Exception as exc:
            raise EncodeError(f"{self._format.pillow_format} encoding failed: {exc}") from exc
        return buffer.getvalue()

    def _save_options(self, quality: float) -> dict[str, int]:
        if self._format.lossless:
            return {"compress_level": _PNG_COMPRESS_LEVEL}
        return {"quality": max(1, min(100, round(quality * 100)))}
