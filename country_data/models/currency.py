from pydantic import BaseModel, ConfigDict, Field


class Currency(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    country_code: str = Field(alias="country", min_length=1)
    name: str = ""
    code: str = ""
    symbol: str = ""
