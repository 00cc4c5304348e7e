import logging
from pathlib import Path
from typing import Any, Protocol

from country_data.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

_BUNDLED_FLAGS = default_settings.bundled_assets_dir / "flags"


class ResourceNotFoundError(LookupError):
    pass


class ImageSource(Protocol):
    """Host capability mapping a resource identifier to an image handle."""

    def lookup_image_id(self, name: str) -> Any | None: ...


class DirectoryImageSource:
    """Image handles are paths of files named ``<name><ext>``.

    Directories are searched in order; the bundled flags directory, which
    ships the globe image, is always searched last.
    """

    def __init__(self, *directories: Path | str, extensions: list[str] | None = None):
        self.directories = [Path(d) for d in directories]
        if _BUNDLED_FLAGS not in self.directories:
            self.directories.append(_BUNDLED_FLAGS)
        self.extensions = default_settings.flag_extensions if extensions is None else extensions

    def lookup_image_id(self, name: str) -> Path | None:
        for directory in self.directories:
            # Bundled images are all SVG
            extensions = [".svg"] if directory == _BUNDLED_FLAGS else self.extensions
            for ext in extensions:
                candidate = directory / f"{name}{ext}"
                if candidate.is_file():
                    return candidate
        return None


class FlagResolver:
    def __init__(
        self,
        source: ImageSource,
        aliases: dict[str, str] | None = None,
        prefix: str = "lang_",
        globe_name: str = "globe",
    ):
        self.source = source
        self.prefix = prefix
        self.aliases = {
            code.lower(): key
            for code, key in (default_settings.flag_aliases if aliases is None else aliases).items()
        }
        self.globe = source.lookup_image_id(f"{prefix}{globe_name}")
        if self.globe is None:
            raise ResourceNotFoundError(f"No globe image named {prefix}{globe_name!r}")

    def resource_name(self, code: str) -> str:
        code = code.lower()
        return f"{self.prefix}{self.aliases.get(code, code)}"

    def resolve(self, code: str) -> Any:
        name = self.resource_name(code)
        handle = self.source.lookup_image_id(name)
        if handle is None:
            logger.debug("No flag image %s, using globe", name)
            return self.globe
        return handle


def flag_resolver_from_settings(cfg: Settings) -> FlagResolver:
    source = DirectoryImageSource(*cfg.flags_dirs, extensions=cfg.flag_extensions)
    return FlagResolver(source, cfg.flag_aliases, cfg.flag_prefix, cfg.globe_name)
