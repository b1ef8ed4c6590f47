"""
Client for the Bambu Lab cloud API.

Log in once, then read the account's print tasks:

    cloud = BambuCloud.login(Region.Europe, "me@example.com", "secret")
    tasks = cloud.get_tasks()
"""

from bambu_cloud.adapters.bambu.bambu import BambuCloud
from bambu_cloud.errors import BambuCloudError, CameraUrlError, ConfigurationError, LoginError
from bambu_cloud.schemas import Account, AMSDetail, Device, Region, Task, Token

login = BambuCloud.login

__all__ = [
    "AMSDetail",
    "Account",
    "BambuCloud",
    "BambuCloudError",
    "CameraUrlError",
    "ConfigurationError",
    "Device",
    "LoginError",
    "Region",
    "Task",
    "Token",
    "login",
]
