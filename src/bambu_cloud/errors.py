"""Exceptions raised by the cloud client. HTTP failures outside login stay `requests` errors."""


class BambuCloudError(Exception):
    """Base class for errors raised by this package."""


class LoginError(BambuCloudError):
    """The login request failed or its response could not be decoded."""


class CameraUrlError(BambuCloudError):
    """The camera ticket could not be turned into a stream URL."""


class ConfigurationError(BambuCloudError):
    """Required settings (credentials, region) are missing or invalid."""
