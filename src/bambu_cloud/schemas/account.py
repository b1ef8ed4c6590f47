from typing import List

from pydantic import BaseModel, ConfigDict, Field, HttpUrl
from pydantic.alias_generators import to_camel


class Personal(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    bio: str
    links: List[HttpUrl] = Field(default_factory=list)
    task_weight_sum: float
    task_length_sum: int
    task_time_sum: int
    background_url: HttpUrl


class Account(BaseModel):
    """Profile of the logged-in user, including lifetime print totals."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    uid: int
    email: str = Field(..., alias="account")
    name: str
    avatar: HttpUrl
    fan_count: int
    follow_count: int
    like_count: int
    collection_count: int
    download_count: int
    product_models: List[str] = Field(default_factory=list)
    my_like_count: int
    favourites_count: int
    point: int
    personal: Personal
