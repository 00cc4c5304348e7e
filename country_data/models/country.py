from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from country_data.models.currency import Currency

WORLD_ALPHA2 = "xx"
WORLD_ALPHA3 = "xxx"


class Country(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    alpha2: str = Field(min_length=1)
    alpha3: str = Field(min_length=1)
    name: str = ""
    numeric_code: str = Field(default="", alias="id")

    # Assigned while the registry is built
    flag_handle: Any = Field(default=None, exclude=True)
    currency: Currency | None = Field(default=None, exclude=True)

    @property
    def key(self) -> str:
        return self.alpha2.lower()

    @property
    def numeric_id(self) -> int | None:
        try:
            return int(self.numeric_code)
        except ValueError:
            return None

    @property
    def is_world(self) -> bool:
        return self.alpha2.lower() == WORLD_ALPHA2 or self.alpha3.lower() == WORLD_ALPHA3
