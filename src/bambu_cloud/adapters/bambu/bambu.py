import logging
from typing import List, Optional
from urllib.parse import urlencode

import jwt
import requests
from pydantic import AnyUrl, TypeAdapter, ValidationError

from bambu_cloud import cloud_constants
from bambu_cloud.adapters.bambu.client import Bambu_APIClient
from bambu_cloud.errors import CameraUrlError, ConfigurationError, LoginError
from bambu_cloud.schemas import (
    Account,
    CameraTicket,
    Device,
    DevicesResponse,
    LoginResponse,
    Region,
    Task,
    TasksResponse,
    Token,
)
from bambu_cloud.settings import Settings, get_settings

logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)


class BambuCloud():
    """Logged-in handle on the vendor cloud. Build it with `BambuCloud.login`."""

    def __init__(self, client: Bambu_APIClient, token: Token):
        self._client: Bambu_APIClient = client
        self._token: Token = token
        self._client.set_token(token.jwt)

    @classmethod
    def login(cls, region: Region, email: str, password: str, settings: Optional[Settings] = None) -> "BambuCloud":
        """
        Log in with account credentials and return a client handle.

        Raises:
            LoginError: if the request fails, the server rejects the credentials,
                or the returned token cannot be decoded
        """
        client = Bambu_APIClient(region, settings=settings)
        logger.info(f"Logging in to {client.base_url} (region={region.name})")

        try:
            payload = client.post(cloud_constants.LOGIN_PATH, json={"account": email, "password": password})
        except (requests.RequestException, ValueError) as e:
            client.close()
            raise LoginError("failed to send login request") from e

        try:
            response = LoginResponse.model_validate(payload)
            token = Token.from_jwt(response.access_token)
        except (ValidationError, jwt.InvalidTokenError) as e:
            client.close()
            raise LoginError("failed to parse login response") from e

        logger.info(f"Logged in as {token.username}")
        return cls(client, token)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "BambuCloud":
        """Log in with the region and credentials found in settings (.env / BAMBU_* vars)."""
        cfg = settings if settings is not None else get_settings()
        if not cfg.has_credentials:
            raise ConfigurationError("BAMBU_EMAIL and BAMBU_PASSWORD must be set to log in")
        return cls.login(cfg.region, cfg.email, cfg.password.get_secret_value(), settings=cfg)

    @property
    def region(self) -> Region:
        return self._client.region

    @property
    def token(self) -> Token:
        return self._token

    @property
    def username(self) -> str:
        return self._token.username

    @property
    def mqtt_host(self) -> str:
        """MQTT broker serving this client's region."""
        if self.region.is_china():
            return cloud_constants.MQTT_HOST_CHINA
        return cloud_constants.MQTT_HOST_GLOBAL

    def get_profile(self) -> Account:
        """Fetches the account profile of the logged-in user"""
        response = self._client.get(cloud_constants.PROFILE_PATH)
        return Account.model_validate(response)

    def get_devices(self) -> List[Device]:
        """Fetches the printers bound to the account"""
        response = self._client.get(cloud_constants.DEVICES_PATH)
        devices = DevicesResponse.model_validate(response).devices
        logger.debug(f"Found {len(devices)} devices")
        return devices

    def get_tasks(self, only_device: Optional[str] = None) -> List[Task]:
        """
        Fetches the print tasks of the account, newest first as the cloud returns them.

        Args:
            only_device: restrict the list to one device id; all devices when None
        """
        params = {
            "limit": str(self._client.cfg.tasks_limit),
            "deviceId": only_device or "",
        }
        response = self._client.get(cloud_constants.TASKS_PATH, params=params)
        parsed = TasksResponse.model_validate(response)
        logger.debug(f"Received {len(parsed.hits)} tasks (total reported: {parsed.total})")
        return parsed.hits

    def get_camera_url(self, device: Device) -> str:
        """
        Requests a camera ticket for a device and returns its stream URL.

        Raises:
            CameraUrlError: if the ticket does not form a valid URL
        """
        response = self._client.post(
            cloud_constants.CAMERA_TICKET_PATH,
            json={"dev_id": device.dev_id},
            headers={"user-id": self.username},
        )
        try:
            ticket = CameraTicket.model_validate(response)
        except ValidationError as e:
            raise CameraUrlError("failed to get camera URL") from e

        query = urlencode({"authkey": ticket.authkey, "passwd": ticket.passwd, "region": ticket.region})
        url = f"{cloud_constants.CAMERA_URL_SCHEME}:///{ticket.ttcode}?{query}"
        try:
            return str(_URL_ADAPTER.validate_python(url))
        except ValidationError as e:
            raise CameraUrlError("failed to parse camera URL") from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "BambuCloud":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
