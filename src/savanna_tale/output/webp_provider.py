"""WebP output provider."""

from .base import OutputProvider


class WebPOutputProvider(OutputProvider):
    """Animated WebP. Lossy by default: the sky gradient compresses poorly losslessly."""

    output_format = "WEBP"

    def __init__(self, path: str = "", quality: int = 90):
        super().__init__(path)
        self.quality = quality

    def save_options(self) -> dict[str, object]:
        return {"lossless": False, "quality": self.quality, "method": 4}
