"""
Shared test fixtures.

Fixtures:
    felix_json  — the two-region declaration used across codec tests
    chain       — regions a{x.a} <- b{x.b} <- c{x.c}
"""

import pytest

from api_regions import ApiRegions

FELIX_JSON = (
    '[{"name":"base","exports":["org.apache.felix.inventory"]},'
    '{"name":"extended","exports":["org.apache.felix.scr.component"]}]'
)


@pytest.fixture
def felix_json() -> str:
    return FELIX_JSON


@pytest.fixture
def regions() -> ApiRegions:
    return ApiRegions()


@pytest.fixture
def chain(regions):
    """Three chained regions, each declaring one package."""
    regions.create_new("a").add("x.a")
    regions.create_new("b").add("x.b")
    regions.create_new("c").add("x.c")
    return regions


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the caller's environment out of serialization output."""
    for var in ("API_REGIONS_LOG_LEVEL", "API_REGIONS_JSON_INDENT", "API_REGIONS_EXTENSION_NAME"):
        monkeypatch.delenv(var, raising=False)
