import logging
from threading import Lock
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from country_data.models.country import WORLD_ALPHA2, Country
from country_data.models.currency import Currency
from country_data.services.flag_resolver import FlagResolver

logger = logging.getLogger(__name__)

WORLD_IDENTIFIERS = frozenset({"xx", "xxx", "world", "globe"})


def normalize_identifier(identifier: str | None) -> str:
    if not identifier:
        return ""
    # Older releases keyed some flags with underscores
    return identifier.strip().lower().replace("-", "_")


class _Snapshot:
    """Read-only lookup tables, published as a whole."""

    def __init__(
        self,
        flag_of: Mapping[str, Any],
        currency_of: Mapping[str, Currency],
        country_of: Mapping[str, Country],
        index: Mapping[str, str],
    ):
        self.flag_of = MappingProxyType(dict(flag_of))
        self.currency_of = MappingProxyType(dict(currency_of))
        self.country_of = MappingProxyType(dict(country_of))
        self.index = MappingProxyType(dict(index))


_EMPTY = _Snapshot({}, {}, {}, {})


class Registry:
    def __init__(self, resolver: FlagResolver):
        self.resolver = resolver
        self._snapshot = _EMPTY
        self._lock = Lock()
        self._built = False

    @property
    def globe(self) -> Any:
        return self.resolver.globe

    @property
    def is_built(self) -> bool:
        return self._built

    def build(self, countries: Iterable[Country], currencies: Iterable[Currency]) -> None:
        """Resolve flags and currencies for every country and publish the tables.

        Nothing is visible to readers until the whole pass has finished.
        """
        with self._lock:
            if self._built:
                raise RuntimeError("Registry has already been built")

            currency_by_country = {c.country_code.lower(): c for c in currencies}
            flag_of: dict[str, Any] = {}
            currency_of: dict[str, Currency] = {}
            country_of: dict[str, Country] = {}
            index: dict[str, str] = {}

            for country in countries:
                key = country.key
                if key in flag_of:
                    logger.warning("Duplicate country code %r, replacing earlier record", key)

                if country.is_world:
                    country.flag_handle = self.resolver.globe
                    country.currency = None
                else:
                    country.flag_handle = self.resolver.resolve(key)
                    country.currency = currency_by_country.get(key)
                    numeric = "" if country.numeric_id is None else str(country.numeric_id)
                    for alias in (country.alpha3, country.numeric_code, numeric, country.name):
                        alias = normalize_identifier(alias)
                        if alias and alias != key:
                            index.setdefault(alias, key)

                flag_of[key] = country.flag_handle
                country_of[key] = country
                if country.currency is not None:
                    currency_of[key] = country.currency

            self._snapshot = _Snapshot(flag_of, currency_of, country_of, index)
            self._built = True

        logger.info(
            "Registered %d countries, %d with a currency", len(flag_of), len(currency_of)
        )

    def _key(self, snapshot: _Snapshot, identifier: str | None) -> str | None:
        key = normalize_identifier(identifier)
        if key in snapshot.country_of:
            return key
        return snapshot.index.get(key)

    def lookup_flag(self, identifier: str | None) -> Any:
        if normalize_identifier(identifier) in WORLD_IDENTIFIERS:
            return self.globe
        snapshot = self._snapshot
        key = self._key(snapshot, identifier)
        if key is None:
            return self.globe
        return snapshot.flag_of[key]

    def lookup_currency(self, identifier: str | None) -> Currency | None:
        if normalize_identifier(identifier) in WORLD_IDENTIFIERS:
            return None
        snapshot = self._snapshot
        key = self._key(snapshot, identifier)
        if key is None:
            return None
        return snapshot.currency_of.get(key)

    def lookup_country(self, identifier: str | None) -> Country | None:
        snapshot = self._snapshot
        if normalize_identifier(identifier) in WORLD_IDENTIFIERS:
            return snapshot.country_of.get(WORLD_ALPHA2)
        key = self._key(snapshot, identifier)
        if key is None:
            return None
        return snapshot.country_of[key]

    def all_country_codes(self) -> set[str]:
        return set(self._snapshot.flag_of)

    def all_currencies(self) -> list[Currency]:
        return list(self._snapshot.currency_of.values())

    def all_countries(self) -> list[Country]:
        return list(self._snapshot.country_of.values())
