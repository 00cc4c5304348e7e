import json
import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from country_data.models.country import Country
from country_data.models.currency import Currency

logger = logging.getLogger(__name__)

_Model = TypeVar("_Model", bound=BaseModel)


class DecodeError(ValueError):
    """An asset is not a JSON array of well-formed records."""


def _parse(data: bytes | str, model: type[_Model], asset: str) -> list[_Model]:
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"{asset}: invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise DecodeError(f"{asset}: expected a JSON array, got {type(raw).__name__}")

    records = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise DecodeError(f"{asset}[{index}]: expected an object, got {type(item).__name__}")
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            raise DecodeError(f"{asset}[{index}]: {e}") from e

    logger.debug("Parsed %d %s records", len(records), asset)
    return records


def parse_countries(data: bytes | str) -> list[Country]:
    return _parse(data, Country, "countries")


def parse_currencies(data: bytes | str) -> list[Currency]:
    return _parse(data, Currency, "currencies")
