"""Process-wide access to the country and currency lookup tables.

``initialize`` is the composition root: the first call wires the default
asset source and flag resolver from ``Settings`` (unless collaborators are
injected) and starts ingestion on a background thread. Lookups made before
ingestion finishes see an empty registry, so flags fall back to the globe and
currencies to ``None``. Use ``wait_until_ready`` or the future returned by
``WorldData.start`` when a caller needs the loaded data.
"""

import logging
from concurrent.futures import Future
from threading import Event, Lock, Thread
from typing import Any, Iterable

from country_data.config import Settings, settings as default_settings
from country_data.models.country import Country
from country_data.models.currency import Currency
from country_data.services.asset_parser import parse_countries, parse_currencies
from country_data.services.asset_source import (
    COUNTRIES,
    CURRENCIES,
    AssetSource,
    asset_source_from_settings,
)
from country_data.services.flag_resolver import FlagResolver, flag_resolver_from_settings
from country_data.services.registry import Registry

logger = logging.getLogger(__name__)


class WorldData:
    def __init__(
        self,
        asset_source: AssetSource,
        resolver: FlagResolver,
        *,
        settings: Settings | None = None,
    ):
        self.asset_source = asset_source
        self.registry = Registry(resolver)
        self.settings = settings or default_settings
        self.error: Exception | None = None
        self._finished = Event()
        self._future: Future | None = None
        self._lock = Lock()

    def start(self) -> Future:
        """Start ingestion once; later calls return the same future."""
        with self._lock:
            if self._future is None:
                self._future = Future()
                Thread(target=self._run, name="country-data", daemon=True).start()
        return self._future

    def _run(self) -> None:
        self._future.set_running_or_notify_cancel()
        try:
            self._future.set_result(self._load())
        except Exception as e:
            self._future.set_exception(e)

    def _load(self) -> int:
        logger.info("Loading country data")
        try:
            countries = parse_countries(self.asset_source.read(COUNTRIES))
            currencies = parse_currencies(self.asset_source.read(CURRENCIES))
            self.registry.build(countries, currencies)
        except Exception as e:
            self.error = e
            logger.exception("Country data ingestion failed")
            raise
        finally:
            self._finished.set()
        return len(countries)

    @property
    def ready(self) -> bool:
        return self.registry.is_built

    def wait_until_ready(self, timeout: float | None = None) -> bool:
        """Block until ingestion has finished; False on timeout or failure."""
        if timeout is None:
            timeout = self.settings.load_timeout_seconds
        self._finished.wait(timeout)
        return self.ready

    def globe(self) -> Any:
        return self.registry.globe

    def flag_for(self, identifier: str | None) -> Any:
        return self.registry.lookup_flag(identifier)

    def flags_for(self, identifiers: Iterable[str]) -> list[Any]:
        return [self.flag_for(identifier) for identifier in identifiers]

    def currency_for(self, identifier: str | None) -> Currency | None:
        return self.registry.lookup_currency(identifier)

    def country_for(self, identifier: str | None) -> Country | None:
        return self.registry.lookup_country(identifier)

    def countries(self) -> set[str]:
        return self.registry.all_country_codes()

    def currencies(self) -> list[Currency]:
        return self.registry.all_currencies()

    def all_countries(self) -> list[Country]:
        return self.registry.all_countries()


_instance: WorldData | None = None
_instance_lock = Lock()


def initialize(
    asset_source: AssetSource | None = None,
    resolver: FlagResolver | None = None,
    *,
    settings: Settings | None = None,
) -> WorldData:
    global _instance
    if _instance is not None:
        return _instance
    with _instance_lock:
        if _instance is None:
            cfg = settings or default_settings
            world = WorldData(
                asset_source or asset_source_from_settings(cfg),
                resolver or flag_resolver_from_settings(cfg),
                settings=cfg,
            )
            world.start()
            _instance = world
    return _instance


def instance() -> WorldData | None:
    return _instance


def reset() -> None:
    global _instance
    with _instance_lock:
        _instance = None


def wait_until_ready(timeout: float | None = None) -> bool:
    return initialize().wait_until_ready(timeout)


def globe() -> Any:
    return initialize().globe()


def flag_for(identifier: str | None) -> Any:
    return initialize().flag_for(identifier)


def flags_for(identifiers: Iterable[str]) -> list[Any]:
    return initialize().flags_for(identifiers)


def currency_for(identifier: str | None) -> Currency | None:
    return initialize().currency_for(identifier)


def country_for(identifier: str | None) -> Country | None:
    return initialize().country_for(identifier)


def countries() -> set[str]:
    return initialize().countries()


def currencies() -> list[Currency]:
    return initialize().currencies()
