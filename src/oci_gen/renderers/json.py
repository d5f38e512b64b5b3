"""JSON encoding and decoding of runtime configs."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from oci_gen.models.spec import SpecDocument, prune_empty
from oci_gen.renderers.base import BaseRenderer, ExportOptions, OutputFormat, RenderContext
from oci_gen.utils.errors import DecodeError, SerializationError


def encode_spec(
    spec: SpecDocument,
    export: ExportOptions | None = None,
    indent: int | str | None = "\t",
) -> str:
    """Encode a runtime config as JSON.

    Fields appear in declaration order and null fields are omitted.

    Args:
        spec: Runtime config to encode
        export: Export toggles; ``seccomp`` encodes only linux.seccomp
        indent: Indentation passed to json.dumps

    Returns:
        JSON text

    Raises:
        SerializationError: If the config cannot be encoded
    """
    export = export or ExportOptions()
    try:
        if export.seccomp:
            seccomp = spec.linux.seccomp if spec.linux is not None else None
            data: Any = None
            if seccomp is not None:
                data = seccomp.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            data = spec.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(data, indent=indent, ensure_ascii=False)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode runtime config: {e}") from e


def decode_spec(data: str | bytes, source: str | None = None) -> SpecDocument:
    """Decode JSON text into a runtime config.

    Args:
        data: JSON text or UTF-8 bytes
        source: Where the data came from, for error messages

    Returns:
        Decoded SpecDocument

    Raises:
        DecodeError: If the data is not JSON or does not match the schema
    """
    try:
        return SpecDocument.model_validate_json(data)
    except PydanticValidationError as e:
        where = f" from {source}" if source else ""
        raise DecodeError(f"Failed to decode runtime config{where}: {e}", source=source) from e


class JSONRenderer(BaseRenderer):
    """Renderer for JSON output format.

    Example:
        renderer = JSONRenderer()
        text = renderer.render(generator.spec, RenderContext(indent=2))
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.JSON

    def render(self, data: Any, context: RenderContext) -> str:
        """Render a runtime config (or any other model) to JSON.

        Runtime configs are pruned the way Generator.to_json prunes them,
        on a copy so that the caller's document is left as it was.
        """
        if isinstance(data, SpecDocument):
            spec = data.model_copy(deep=True)
            prune_empty(spec)
            return encode_spec(spec, context.export, context.indent)
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        try:
            return json.dumps(data, indent=context.indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to encode output: {e}") from e
