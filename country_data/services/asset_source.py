from importlib import resources
from pathlib import Path
from typing import Protocol

from country_data.config import Settings, settings as default_settings

COUNTRIES = "countries"
CURRENCIES = "currencies"


class AssetSource(Protocol):
    """Provides the raw bytes of a bundled asset by logical name."""

    def read(self, name: str) -> bytes: ...


class DirectoryAssetSource:
    def __init__(self, directory: Path | str, files: dict[str, str] | None = None):
        self.directory = Path(directory)
        self._files = default_settings.asset_files if files is None else files

    def read(self, name: str) -> bytes:
        return (self.directory / self._files[name]).read_bytes()


class PackageAssetSource:
    """Reads the assets shipped inside the country_data package."""

    def __init__(self, files: dict[str, str] | None = None):
        self._files = default_settings.asset_files if files is None else files

    def read(self, name: str) -> bytes:
        asset = resources.files("country_data") / "assets" / self._files[name]
        return asset.read_bytes()


def asset_source_from_settings(cfg: Settings) -> AssetSource:
    if cfg.assets_dir is not None:
        return DirectoryAssetSource(cfg.assets_dir, cfg.asset_files)
    return PackageAssetSource(cfg.asset_files)
