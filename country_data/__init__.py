from country_data.config import Settings
from country_data.models.country import Country
from country_data.models.currency import Currency
from country_data.services.asset_parser import DecodeError
from country_data.world import (
    WorldData,
    countries,
    country_for,
    currencies,
    currency_for,
    flag_for,
    flags_for,
    globe,
    initialize,
    wait_until_ready,
)

__version__ = "1.5.1"

__all__ = [
    "Country",
    "Currency",
    "DecodeError",
    "Settings",
    "WorldData",
    "countries",
    "country_for",
    "currencies",
    "currency_for",
    "flag_for",
    "flags_for",
    "globe",
    "initialize",
    "wait_until_ready",
]
