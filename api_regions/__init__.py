"""
API regions for modular distributions.

An api-regions declaration is an ordered list of named regions, each
exporting a set of Java-style packages and inheriting everything exported
by the region declared before it:

- ApiRegion: one region, with inheritance-aware lookup and iteration
- ApiRegions: the ordered, name-unique chain of regions
- codec: conversion to and from the JSON array-of-objects wire format
"""

from api_regions.codec import dump, from_extension, load, parse, serialize, to_extension, to_json
from api_regions.config import ApiRegionsConfig, configure_logging
from api_regions.errors import ApiRegionsError, InvalidArgumentError, MalformedInputError
from api_regions.extension import API_REGIONS_EXTENSION_NAME, Extension, ExtensionType
from api_regions.iterators import JoinedIterator
from api_regions.model import KEYWORDS, ApiRegion, ApiRegions, is_valid_package_name

__all__ = [
    # Model
    "ApiRegion",
    "ApiRegions",
    "JoinedIterator",
    "KEYWORDS",
    "is_valid_package_name",
    # Codec
    "parse",
    "serialize",
    "to_json",
    "load",
    "dump",
    "from_extension",
    "to_extension",
    # Feature-file extension
    "Extension",
    "ExtensionType",
    "API_REGIONS_EXTENSION_NAME",
    # Errors
    "ApiRegionsError",
    "InvalidArgumentError",
    "MalformedInputError",
    # Configuration
    "ApiRegionsConfig",
    "configure_logging",
]
