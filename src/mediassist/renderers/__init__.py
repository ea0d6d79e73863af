"""Renderers that turn a parsed Document into output."""

from mediassist.renderers.base import Renderer
from mediassist.renderers.console_renderer import ConsoleRenderer
from mediassist.renderers.docx_renderer import DOCXRenderer
from mediassist.renderers.markdown_renderer import MarkdownRenderer

__all__ = [
    "Renderer",
    "ConsoleRenderer",
    "DOCXRenderer",
    "MarkdownRenderer",
]

# Map file extensions to renderers
RENDERER_MAP: dict[str, type[Renderer]] = {
    ".md": MarkdownRenderer,
    ".txt": MarkdownRenderer,
    ".docx": DOCXRenderer,
}

SUPPORTED_EXTENSIONS = tuple(RENDERER_MAP.keys())


def get_renderer(extension: str) -> type[Renderer]:
    """Get the appropriate renderer class for a file extension."""
    ext = extension.lower()
    if ext not in RENDERER_MAP:
        raise ValueError(
            f"Unsupported output format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return RENDERER_MAP[ext]
