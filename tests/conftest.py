# tests/conftest.py

import json

import pytest

from country_data import world as world_module
from country_data.services.flag_resolver import FlagResolver

COUNTRIES = [
    {"id": "250", "alpha2": "fr", "alpha3": "fra", "name": "France"},
    {"id": "276", "alpha2": "de", "alpha3": "deu", "name": "Germany"},
    {"id": "214", "alpha2": "do", "alpha3": "dom", "name": "Dominican Republic"},
    {"id": "624", "alpha2": "gw", "alpha3": "gnb", "name": "Guinea-Bissau"},
    {"id": "010", "alpha2": "aq", "alpha3": "ata", "name": "Antarctica"},
    {"id": "999", "alpha2": "xx", "alpha3": "xxx", "name": "World"},
]

CURRENCIES = [
    {"country": "FR", "name": "Euro", "code": "EUR", "symbol": "€"},
    {"country": "de", "name": "Euro", "code": "EUR", "symbol": "€"},
    {"country": "DO", "name": "Dominican peso", "code": "DOP", "symbol": "$"},
    {"country": "GW", "name": "West African CFA franc", "code": "XOF", "symbol": "Fr"},
]

IMAGES = ["lang_globe", "lang_fr", "lang_de", "lang_dominican", "lang_gw", "lang_do_not_use"]


class FakeImageSource:
    """Handles are the resource names prefixed with "img:"."""

    def __init__(self, names):
        self.names = set(names)
        self.lookups = []

    def lookup_image_id(self, name):
        self.lookups.append(name)
        if name in self.names:
            return f"img:{name}"
        return None


class MemoryAssetSource:
    def __init__(self, assets):
        self.assets = assets
        self.reads = []

    def read(self, name):
        self.reads.append(name)
        return self.assets[name]


def encode(records) -> bytes:
    return json.dumps(records).encode("utf-8")


@pytest.fixture
def image_source() -> FakeImageSource:
    return FakeImageSource(IMAGES)


@pytest.fixture
def resolver(image_source) -> FlagResolver:
    return FlagResolver(image_source, aliases={"do": "dominican"})


@pytest.fixture
def asset_source() -> MemoryAssetSource:
    return MemoryAssetSource({"countries": encode(COUNTRIES), "currencies": encode(CURRENCIES)})


@pytest.fixture(autouse=True)
def reset_world():
    world_module.reset()
    yield
    world_module.reset()
