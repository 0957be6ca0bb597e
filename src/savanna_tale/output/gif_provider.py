"""GIF output provider."""

from .base import OutputProvider


class GifOutputProvider(OutputProvider):
    """Palette-quantized GIF; each frame fully replaces the previous one."""

    output_format = "GIF"
    # GIF stores delays in hundredths of a second
    duration_step = 10

    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "disposal": 2}
