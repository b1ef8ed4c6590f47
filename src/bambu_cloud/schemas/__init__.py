"""
Cloud Schemas - Pydantic models for the vendor's JSON payloads

Field names are Pythonic; wire names (camelCase on most endpoints) are
declared as aliases. Unknown fields sent by the cloud are ignored.
"""

from bambu_cloud.schemas.region import Region
from bambu_cloud.schemas.auth import LoginResponse, Token
from bambu_cloud.schemas.task import AMSDetail, Task, TasksResponse
from bambu_cloud.schemas.device import CameraTicket, Device, DevicesResponse
from bambu_cloud.schemas.account import Account, Personal

__all__ = [
    "AMSDetail",
    "Account",
    "CameraTicket",
    "Device",
    "DevicesResponse",
    "LoginResponse",
    "Personal",
    "Region",
    "Task",
    "TasksResponse",
    "Token",
]
