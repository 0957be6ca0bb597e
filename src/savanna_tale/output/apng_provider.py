"""Animated PNG output provider."""

from .base import OutputProvider


class ApngOutputProvider(OutputProvider):
    """Full-color animated PNG, for when GIF banding is not acceptable."""

    output_format = "PNG"

    def save_options(self) -> dict[str, object]:
        return {"default_image": False}
