from enum import Enum


class ImageFormat(str, Enum):
    """Output codecs, valued by their canonical file extension."""

    JPEG = "jpg"
    WEBP = "webp"
    PNG = "png"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def pillow_format(self) -> str:
        return _PILLOW_FORMATS[self]

    @property
    def lossless(self) -> bool:
        return self is ImageFormat.PNG

    @classmethod
    def parse(cls, value: str) -> "ImageFormat":
        key = value.strip().lower().lstrip(".")
        fmt = _ALIASES.get(key)
        if fmt is None:
            raise ValueError(
                f"Unknown image format '{value}'. Choose from: {[f.value for f in cls]}"
            )
        return fmt


_PILLOW_FORMATS = {
    ImageFormat.JPEG: "JPEG",
    ImageFormat.WEBP: "WEBP",
    ImageFormat.PNG: "PNG",
}

_ALIASES = {
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "webp": ImageFormat.WEBP,
    "png": ImageFormat.PNG,
}
