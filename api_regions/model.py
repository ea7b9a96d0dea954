"""
In-memory model of an api-regions declaration.

An ApiRegions collection is an ordered chain of named regions. Every region
declares a set of exported API packages and inherits all packages of the
region declared before it:

    base      -> org.apache.felix.inventory
    extended  -> org.apache.felix.scr.component  (+ everything in base)

Package names are filtered on the way in: malformed names and names using a
reserved keyword as a segment are silently dropped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, KeysView
from typing import Dict, List, Optional

from api_regions.errors import InvalidArgumentError
from api_regions.iterators import JoinedIterator

LOG = logging.getLogger("api_regions.model")

PACKAGE_NAME_PATTERN = re.compile(r"^[a-z]+(\.[a-zA-Z_][a-zA-Z0-9_]*)*$")

PACKAGE_DELIMITER = "."

_CREATION_KEY = object()

KEYWORDS = frozenset(
    {
        "abstract", "continue", "for", "new", "switch",
        "assert", "default", "package", "synchronized",
        "boolean", "do", "if", "private", "this",
        "break", "double", "implements", "protected", "throw",
        "byte", "else", "import", "public", "throws",
        "case", "enum", "instanceof", "return", "transient",
        "catch", "extends", "int", "short", "try",
        "char", "final", "interface", "static", "void",
        "class", "finally", "long", "strictfp", "volatile",
        "float", "native", "super", "while",
    }
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value == ""


def _rejection_reason(api: Optional[str]) -> Optional[str]:
    """Return why *api* is not an acceptable package name, or None."""
    if not isinstance(api, str) or _is_blank(api):
        return "null or empty"
    if not PACKAGE_NAME_PATTERN.match(api):
        return "not a well-formed package name"
    for segment in api.split(PACKAGE_DELIMITER):
        if segment in KEYWORDS:
            return f"segment '{segment}' is a reserved keyword"
    return None


def is_valid_package_name(api: Optional[str]) -> bool:
    """
    Check a package name against the grammar and the reserved keywords.

    Examples:
        >>> is_valid_package_name("org.apache.felix.inventory")
        True
        >>> is_valid_package_name("javax.jms.doc-files")
        False
        >>> is_valid_package_name("org.apache.commons.lang.enum")
        False
    """
    return _rejection_reason(api) is None


class ApiRegion:
    """
    A named set of API packages extending an optional parent region.

    Lookups (``contains``, ``is_empty``, iteration) see the whole ancestor
    chain; ``exports`` only exposes the packages declared on this region.

    Regions are created through :meth:`ApiRegions.create_new`, which is the
    only place a parent gets assigned; calling the constructor directly
    raises TypeError.
    """

    def __init__(self, name: str, *, _parent: Optional["ApiRegion"] = None, _key: object = None):
        if _key is not _CREATION_KEY:
            raise TypeError("ApiRegion instances are created with ApiRegions.create_new()")
        self._name = name
        self._parent = _parent
        # dict keys keep first-insertion order for stable serialization
        self._apis: Dict[str, None] = {}

    @property
    def name(self) -> str:
        """Name identifying this region."""
        return self._name

    @property
    def parent(self) -> Optional["ApiRegion"]:
        """The extended region, None for the first region of a collection."""
        return self._parent

    @property
    def exports(self) -> KeysView[str]:
        """Read-only live view of the packages declared on this region only."""
        return self._apis.keys()

    def add(self, api: Optional[str]) -> bool:
        """
        Add an API package unless it is rejected.

        Null, empty, malformed (e.g. ``javax.jms.doc-files``) and keyword
        clashing (e.g. ``org.apache.commons.lang.enum``) names are ignored,
        as are packages already visible from this region.

        Returns:
            True if the package was added, False otherwise.
        """
        reason = _rejection_reason(api)
        if reason is not None:
            LOG.debug("Region '%s': ignoring package %r (%s)", self._name, api, reason)
            return False

        if self.contains(api):
            LOG.debug("Region '%s': package '%s' already declared", self._name, api)
            return False

        self._apis[api] = None
        return True

    def add_all(self, apis: Iterable[Optional[str]]) -> int:
        """
        Add every package of *apis*, in order, filtering as :meth:`add` does.

        Args:
            apis: Package names; individual bad entries are skipped.

        Returns:
            Number of packages actually added.

        Raises:
            InvalidArgumentError: If *apis* is None.
        """
        if apis is None:
            raise InvalidArgumentError("Impossible to import null APIs")

        added = 0
        for api in apis:
            if self.add(api):
                added += 1
        return added

    def contains(self, api: Optional[str]) -> bool:
        """Check whether *api* is declared here or on any ancestor."""
        if _is_blank(api):
            return False

        region: Optional[ApiRegion] = self
        while region is not None:
            if api in region._apis:
                return True
            region = region._parent
        return False

    def remove(self, api: Optional[str]) -> bool:
        """
        Remove *api* from this region or from the ancestor declaring it.

        Note that the ancestor is mutated when the package was inherited.

        Returns:
            True if the package was removed somewhere in the chain.
        """
        if _is_blank(api):
            return False

        region: Optional[ApiRegion] = self
        while region is not None:
            if api in region._apis:
                del region._apis[api]
                return True
            region = region._parent
        return False

    def is_empty(self) -> bool:
        """True if neither this region nor any ancestor declares a package."""
        region: Optional[ApiRegion] = self
        while region is not None:
            if region._apis:
                return False
            region = region._parent
        return True

    def _lineage(self) -> Iterator["ApiRegion"]:
        region: Optional[ApiRegion] = self
        while region is not None:
            yield region
            region = region._parent

    def __iter__(self) -> Iterator[str]:
        # each region is copied only when the traversal reaches it
        return JoinedIterator(tuple(region._apis) for region in self._lineage())

    def __contains__(self, api: object) -> bool:
        return isinstance(api, str) and self.contains(api)

    def __str__(self) -> str:
        lines = [f"Region '{self._name}'"]
        if self._parent is not None:
            lines[0] += " inherits from "
            lines.append(str(self._parent))
        lines.extend(f" * {api}" for api in self._apis)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ApiRegion({self._name!r}, exports={len(self._apis)})"


class ApiRegions:
    """
    Ordered collection of uniquely named regions forming one inheritance chain.

    Each region created with :meth:`create_new` extends the region created
    just before it.
    """

    def __init__(self) -> None:
        self._regions: List[ApiRegion] = []

    def create_new(self, name: str) -> ApiRegion:
        """
        Append a new region extending the current last one.

        Raises:
            InvalidArgumentError: If *name* is null, empty or already used.
        """
        if not isinstance(name, str) or _is_blank(name):
            raise InvalidArgumentError("Impossible to create a new API region with a null or empty name")

        if self.get_by_name(name) is not None:
            raise InvalidArgumentError(f"API region '{name}' is already defined")

        parent = self._regions[-1] if self._regions else None
        region = ApiRegion(name, _parent=parent, _key=_CREATION_KEY)
        self._regions.append(region)
        return region

    def get_by_name(self, name: Optional[str]) -> Optional[ApiRegion]:
        """Look up a region by name. Returns None if not found."""
        for region in self._regions:
            if region.name == name:
                return region
        return None

    def remove(self, name: Optional[str]) -> Optional[ApiRegion]:
        """
        Remove the named region from the chain.

        The region that extended it is relinked to the removed region's
        parent, so the chain stays contiguous. The removed region is
        detached (its parent becomes None) and keeps its own exports.

        Returns:
            The removed region, or None if no region has that name.
        """
        for index, region in enumerate(self._regions):
            if region.name != name:
                continue

            del self._regions[index]
            if index < len(self._regions):
                child = self._regions[index]
                child._parent = region._parent
                LOG.debug(
                    "Region '%s' now inherits from %s",
                    child.name,
                    repr(child._parent.name) if child._parent is not None else "nothing",
                )
            region._parent = None
            return region
        return None

    def names(self) -> List[str]:
        """Region names in declaration order."""
        return [region.name for region in self._regions]

    def is_empty(self) -> bool:
        return not self._regions

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[ApiRegion]:
        return iter(self._regions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get_by_name(name) is not None

    def __str__(self) -> str:
        return "\n".join(str(region) for region in self._regions)

    def __repr__(self) -> str:
        return f"ApiRegions({self.names()!r})"
