from typing import List

from pydantic import BaseModel, ConfigDict, Field

# Wire models. Amounts, dates and times stay as raw strings here; the scorer
# owns parsing them so a bad value is reported against the field it came from.

class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    short_description: str = Field(default="", alias="shortDescription")
    price: str = ""

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    retailer: str = ""
    purchase_date: str = Field(default="", alias="purchaseDate")
    purchase_time: str = Field(default="", alias="purchaseTime")
    total: str = ""
    items: List[Item] = Field(default_factory=list)

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
