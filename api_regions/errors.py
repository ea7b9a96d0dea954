"""Exceptions raised by the api_regions package."""

from __future__ import annotations


class ApiRegionsError(Exception):
    """Base class for all api_regions errors."""

    pass


class InvalidArgumentError(ApiRegionsError, ValueError):
    """Raised when a required argument is missing, empty or a duplicate."""

    pass


class MalformedInputError(ApiRegionsError, ValueError):
    """Raised when api-regions JSON does not have the expected shape."""

    pass
