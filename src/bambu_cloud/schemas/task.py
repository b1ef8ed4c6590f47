"""
Task Schemas - print-job records returned by the task list endpoint

A Task describes one completed or in-progress print. Records are created
when the response is parsed and never mutated afterwards.
"""

from datetime import datetime, timedelta, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator
from pydantic.alias_generators import to_camel


class AMSDetail(BaseModel):
    """Filament mapping for one AMS slot used by a task."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)

    position: int = Field(..., alias="ams", description="AMS slot index")
    source_color: str = Field(..., description="Colour in the sliced file (RRGGBBAA)")
    target_color: str = Field(..., description="Colour of the loaded filament (RRGGBBAA)")
    filament_id: str
    filament_type: str
    target_filament_type: str
    weight: float = Field(..., description="Grams consumed from this slot")


class Task(BaseModel):
    """
    One print job.

    Units follow the cloud: weight in grams, length in millimetres,
    cost_time in seconds. Timestamps are normalised to UTC.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)

    id: int
    design_id: int
    design_title: str
    instance_id: int
    model_id: str
    title: str
    cover: HttpUrl
    status: int
    feedback_status: int
    start_time: datetime
    end_time: datetime
    weight: float
    length: int
    cost_time: int
    profile_id: int
    plate_index: int
    plate_name: str
    device_id: str
    ams_detail_mapping: List[AMSDetail] = Field(default_factory=list)
    mode: str
    is_public_profile: bool
    is_printable: bool
    device_model: str
    device_name: str
    bed_type: str

    @field_validator("start_time", "end_time")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # Naive timestamps from the cloud are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def duration(self) -> timedelta:
        """Wall-clock time between start and end."""
        return self.end_time - self.start_time

    @property
    def cost_time_delta(self) -> timedelta:
        return timedelta(seconds=self.cost_time)


class TasksResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total: int
    hits: List[Task]
