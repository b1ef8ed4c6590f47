from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Device(BaseModel):
    """A printer bound to the account. The bind endpoint uses snake_case names."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    online: bool
    dev_id: str
    print_status: str
    nozzle_diameter: float
    dev_model_name: str
    dev_access_code: str = Field(..., repr=False)
    dev_product_name: str


class DevicesResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    devices: List[Device]


class CameraTicket(BaseModel):
    """Short-lived credentials for the device's camera stream."""

    model_config = ConfigDict(extra="ignore")

    ttcode: str
    authkey: str = Field(..., repr=False)
    passwd: str = Field(..., repr=False)
    region: str
