"""Output format renderers."""

from oci_gen.renderers.base import BaseRenderer, ExportOptions, OutputFormat, RenderContext, Renderer
from oci_gen.renderers.json import JSONRenderer, decode_spec, encode_spec
from oci_gen.renderers.terminal import TerminalRenderer

__all__ = [
    "BaseRenderer",
    "ExportOptions",
    "OutputFormat",
    "RenderContext",
    "Renderer",
    "JSONRenderer",
    "TerminalRenderer",
    "decode_spec",
    "encode_spec",
    "get_renderer",
]


def get_renderer(format: OutputFormat | str) -> BaseRenderer:
    """Get a renderer for the specified format.

    Raises:
        ValueError: If format is not supported
    """
    if isinstance(format, str):
        format = OutputFormat(format)

    renderers = {
        OutputFormat.JSON: JSONRenderer,
        OutputFormat.TERMINAL: TerminalRenderer,
    }

    renderer_class = renderers.get(format)
    if renderer_class is None:
        raise ValueError(f"Unsupported format: {format}")

    return renderer_class()
