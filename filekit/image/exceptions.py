class ImageProcessingError(Exception):
    """Base exception for all image recompression errors."""


class DecodeError(ImageProcessingError):
    """Raised when source bytes cannot be decoded into an image."""


class EncodeError(ImageProcessingError):
    """Raised when the target codec fails to encode a surface."""
