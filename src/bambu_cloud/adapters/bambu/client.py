import logging
from typing import Any, Optional

import certifi  # Provides Mozilla's CA bundle for SSL certificate verification
import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from bambu_cloud.cloud_constants import API_BASE_URL_CHINA, API_BASE_URL_GLOBAL, RETRY_STATUS_FORCELIST
from bambu_cloud.schemas.region import Region
from bambu_cloud.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class Bambu_APIClient:
    def __init__(self,
                region: Region,
                settings: Optional[Settings] = None,
                total_retries: Optional[int] = None,
                backoff_factor: Optional[float] = None,
                status_forcelist: tuple = RETRY_STATUS_FORCELIST):
        """
        Initializes a requests.Session for one cloud region with:
            - JSON accept header
            - HTTPAdapter for retries on connection errors and specified HTTP status codes
        The Authorization header is installed later, once login succeeds.
        """
        self.cfg: Settings = settings if settings is not None else get_settings()
        self.region: Region = region
        self.timeout: float = self.cfg.request_timeout

        if self.cfg.verify_ssl:
            self.verify: bool | str = certifi.where()
        else:
            self.verify = False
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        total_retries = self.cfg.total_retries if total_retries is None else total_retries
        backoff_factor = self.cfg.backoff_factor if backoff_factor is None else backoff_factor

        self.session = requests.Session()

        # Configure retries
        retry_strategy = Retry(
            total=total_retries,
            connect=total_retries,
            read=total_retries,
            backoff_factor=backoff_factor,
            status_forcelist=status_forcelist,
            allowed_methods=frozenset(["GET", "POST"]),
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)

        # Default headers
        self.session.headers.update({
            "Accept": "application/json",
        })

    @property
    def base_url(self) -> str:
        return API_BASE_URL_CHINA if self.region.is_china() else API_BASE_URL_GLOBAL

    def set_token(self, jwt: str) -> None:
        """Send the session token as a bearer header on every later request."""
        self.session.headers["Authorization"] = f"Bearer {jwt}"

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _handle_response(self, resp: requests.Response) -> Any:
        """
            Handle API response with proper error checking and JSON parsing.

            Args:
                resp: HTTP response object

            Returns:
                Parsed JSON data

            Raises:
                requests.HTTPError: For 4xx/5xx HTTP status codes
                ValueError: If response is not valid JSON
            """
        try:
            resp.raise_for_status()
        except requests.HTTPError:
            # Body may explain the rejection (bad credentials, expired token)
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text[:200]}")
            raise

        if not resp.content:
            logger.warning(f"Empty response received for {resp.url}")
            return {}

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Invalid JSON response from {resp.url}: {resp.text[:200]}...")
            raise ValueError(f"Invalid JSON response: {e}") from e

    def get(self, path: str, params=None, headers=None) -> Any:
        """Perform a GET request against the regional API, returning parsed JSON."""
        url = self.url_for(path)
        logger.debug(f"GET {url} params={params}")
        resp = self.session.get(url, params=params, headers=headers, timeout=self.timeout, verify=self.verify)
        return self._handle_response(resp)

    def post(self, path: str, json=None, headers=None) -> Any:
        """Perform a POST request with a JSON body, returning parsed JSON."""
        url = self.url_for(path)
        logger.debug(f"POST {url}")
        resp = self.session.post(url, json=json, headers=headers, timeout=self.timeout, verify=self.verify)
        return self._handle_response(resp)

    def close(self) -> None:
        self.session.close()
