"""Output providers for animated image formats."""

from dataclasses import dataclass
from pathlib import Path

from .apng_provider import ApngOutputProvider
from .base import OutputProvider, frame_durations
from .gif_provider import GifOutputProvider
from .webp_provider import WebPOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    media_type: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "gif": OutputFormatSpec(".gif", "image/gif", GifOutputProvider),
    "webp": OutputFormatSpec(".webp", "image/webp", WebPOutputProvider),
    "png": OutputFormatSpec(".png", "image/apng", ApngOutputProvider),
}


def resolve_output_provider(file_path: str) -> OutputProvider:
    """
    Resolve the output provider from a file extension.

    Args:
        file_path: Output file path; the extension selects the format

    Raises:
        ValueError: If the extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    spec = _OUTPUT_FORMATS.get(ext.removeprefix("."))
    if spec is None:
        supported = ", ".join(spec.extension for spec in _OUTPUT_FORMATS.values())
        raise ValueError(f"Unsupported output format: {ext or file_path}. Supported formats: {supported}")
    return spec.provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    return tuple(_OUTPUT_FORMATS.keys())


def media_type_for_output_format(output_format: str) -> str:
    return _spec_for_format(output_format).media_type


def output_path_for_format(output_format: str, base_name: str = "output") -> str:
    """Build a synthetic output path from a format name."""
    return f"{base_name}{_spec_for_format(output_format).extension}"


def _spec_for_format(output_format: str) -> OutputFormatSpec:
    spec = _OUTPUT_FORMATS.get(output_format.lower())
    if spec is None:
        supported = ", ".join(supported_output_formats())
        raise ValueError(f"Invalid format. Choose from: {supported}")
    return spec


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "frame_durations",
    "GifOutputProvider",
    "WebPOutputProvider",
    "ApngOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
    "media_type_for_output_format",
    "output_path_for_format",
]
