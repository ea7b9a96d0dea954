"""
JSON codec for api-regions declarations.

Wire format (order defines the inheritance chain):

    [
      {"name": "base", "exports": ["org.apache.felix.inventory"]},
      {"name": "extended", "exports": ["org.apache.felix.scr.component"]}
    ]

``exports`` may be omitted. Only the packages declared on a region are
written back; inherited ones are implied by the position in the array.

Usage:
    from api_regions import codec

    regions = codec.parse(text)
    codec.serialize(regions, sys.stdout)
"""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import IO, Any, List, Optional, Union

from pydantic import ValidationError

from api_regions.config import ApiRegionsConfig
from api_regions.errors import InvalidArgumentError, MalformedInputError
from api_regions.extension import Extension, ExtensionType
from api_regions.model import ApiRegions
from api_regions.schema import RegionDeclaration, RegionDeclarations

LOG = logging.getLogger("api_regions.codec")

Source = Union[str, bytes, bytearray, List[Any], Extension, IO[str], IO[bytes]]


def _read_source(source: Source) -> Any:
    """Reduce any accepted source to a decoded JSON value."""
    if isinstance(source, Extension):
        if not source.is_json:
            raise MalformedInputError(
                f"Extension '{source.name}' has type {source.type.value}, expected {ExtensionType.JSON.value}"
            )
        source = source.text

    if hasattr(source, "read"):
        source = source.read()

    if isinstance(source, (bytes, bytearray)):
        try:
            source = bytes(source).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"api-regions input is not valid UTF-8: {exc}") from exc

    if isinstance(source, str):
        try:
            return json.loads(source)
        except json.JSONDecodeError as exc:
            raise MalformedInputError(f"api-regions input is not valid JSON: {exc}") from exc
        except RecursionError as exc:
            raise MalformedInputError("api-regions input is nested too deeply") from exc

    return source


def parse(source: Source) -> ApiRegions:
    """
    Build an ApiRegions collection from its JSON representation.

    Args:
        source: JSON text or UTF-8 bytes, a readable stream, an already
            decoded JSON array, or a JSON-typed feature-file Extension.

    Returns:
        The regions, chained in array order. Package names that fail
        validation are silently left out.

    Raises:
        InvalidArgumentError: If *source* is None.
        MalformedInputError: If the input is not an array of
            ``{"name": str, "exports": [str, ...]}`` objects with unique names.
    """
    if source is None:
        raise InvalidArgumentError("Impossible to parse null api-regions input")

    data = _read_source(source)

    if not isinstance(data, list):
        raise MalformedInputError(
            f"Invalid api-regions format: expected a JSON array, got {type(data).__name__}"
        )

    try:
        declarations = RegionDeclarations.validate_python(data)
    except ValidationError as exc:
        raise MalformedInputError(f"Invalid api-regions format: {exc}") from exc

    regions = ApiRegions()
    dropped = 0
    for declaration in declarations:
        try:
            region = regions.create_new(declaration.name)
        except InvalidArgumentError as exc:
            raise MalformedInputError(f"Invalid api-regions format: {exc}") from exc
        dropped += len(declaration.exports) - region.add_all(declaration.exports)

    LOG.info(
        "Parsed %d api region(s), %d package(s) ignored",
        len(regions),
        dropped,
    )
    return regions


def _declarations(regions: ApiRegions) -> List[RegionDeclaration]:
    return [RegionDeclaration(name=region.name, exports=list(region.exports)) for region in regions]


def to_json(regions: ApiRegions, indent: Optional[int] = None) -> str:
    """
    Render *regions* as JSON text.

    Args:
        regions: The collection to render.
        indent: Pretty-print indentation; defaults to ``API_REGIONS_JSON_INDENT``.
    """
    if regions is None:
        raise InvalidArgumentError("Impossible to serialize null api-regions")

    if indent is None:
        indent = ApiRegionsConfig.from_env().json_indent

    payload = [declaration.model_dump() for declaration in _declarations(regions)]
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def _is_binary(sink: Any) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(sink, "mode", None)
    return isinstance(mode, str) and "b" in mode


def serialize(regions: ApiRegions, sink: Union[IO[str], IO[bytes]], indent: Optional[int] = None) -> None:
    """
    Write *regions* as a JSON array to *sink*.

    Binary sinks receive UTF-8. The sink is neither flushed nor closed.
    """
    text = to_json(regions, indent=indent)
    if _is_binary(sink):
        sink.write(text.encode("utf-8"))
    else:
        sink.write(text)
    LOG.debug("Serialized %d api region(s)", len(regions))


def load(path: Union[str, Path]) -> ApiRegions:
    """Parse an api-regions JSON file."""
    path = Path(path)
    LOG.debug("Loading api-regions from %s", path)
    with path.open("r", encoding="utf-8") as handle:
        return parse(handle)


def dump(regions: ApiRegions, path: Union[str, Path], indent: Optional[int] = None) -> None:
    """Write *regions* to an api-regions JSON file."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as handle:
        serialize(regions, handle, indent=indent)
    LOG.debug("Wrote api-regions to %s", path)


def from_extension(extension: Extension) -> ApiRegions:
    """Parse the payload of a feature-file ``api-regions`` extension."""
    return parse(extension)


def to_extension(regions: ApiRegions, name: Optional[str] = None) -> Extension:
    """Wrap *regions* into a JSON feature-file extension."""
    config = ApiRegionsConfig.from_env()
    return Extension(
        name=name or config.extension_name,
        type=ExtensionType.JSON,
        text=to_json(regions, indent=config.json_indent),
    )
