from abc import ABC, abstractmethod


class BaseImageCodec(ABC):
    """A decoded pixel surface bound to one output format."""

    @property
    @abstractmethod
    def dimensions(self) -> tuple[int, int]:
        """Native (width, height) of the decoded surface."""

    @abstractmethod
    def encode(self, quality: float, scale: float = 1.0) -> bytes:
        """Encode the surface.

        Args:
            quality: Encoder quality in [0, 1]; ignored by lossless formats.
            scale: Factor applied to both native dimensions before encoding.

        Returns:
            The encoded bytes.

        Raises:
            EncodeError: if the codec fails.
        """
