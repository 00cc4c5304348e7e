import json
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    assets_dir: Path | None = None
    countries_asset: str = "countries.json"
    currencies_asset: str = "currencies.json"
    flags_dirs: Annotated[list[Path], NoDecode] = []
    flag_extensions: Annotated[list[str], NoDecode] = [".png", ".webp", ".svg"]
    flag_prefix: str = "lang_"
    globe_name: str = "globe"
    flag_aliases: Annotated[dict[str, str], NoDecode] = {"do": "dominican"}
    load_timeout_seconds: float = 10.0

    @field_validator("flags_dirs", "flag_extensions", mode="before")
    @classmethod
    def parse_list(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("flag_aliases", mode="before")
    @classmethod
    def parse_aliases(cls, v):
        if isinstance(v, str):
            # Accept JSON object or "code=key,code=key"
            v = v.strip()
            if v.startswith("{"):
                return json.loads(v)
            pairs = [s.split("=", 1) for s in v.split(",") if "=" in s]
            return {code.strip(): key.strip() for code, key in pairs}
        return v

    @field_validator("flag_aliases")
    @classmethod
    def lower_alias_codes(cls, v: dict[str, str]) -> dict[str, str]:
        return {code.lower(): key for code, key in v.items()}

    @field_validator("flag_extensions")
    @classmethod
    def dotted_extensions(cls, v: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in v]

    model_config = {
        "env_prefix": "COUNTRY_DATA_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def bundled_assets_dir(self) -> Path:
        return _PACKAGE_DIR / "assets"

    @property
    def asset_files(self) -> dict[str, str]:
        return {
            "countries": self.countries_asset,
            "currencies": self.currencies_asset,
        }


settings = Settings()
