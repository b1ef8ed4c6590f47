import logging

import jwt
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class LoginResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., alias="accessToken")


class Token(BaseModel):
    """
    Session token issued at login.

    The raw JWT is sent as a bearer header. The username claim is needed
    for the camera ticket endpoint.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    jwt: str = Field(..., repr=False)

    @classmethod
    def from_jwt(cls, token: str) -> "Token":
        """
        Read the claims of a cloud-issued JWT.

        The signing key is not published, so the signature is not checked
        and the audience is not validated. Expiry is not checked either:
        an expired token is still accepted here and the cloud rejects it on
        the next authenticated call.

        Raises:
            jwt.InvalidTokenError: if the token cannot be decoded or has no username claim
        """
        claims = jwt.decode(token, options={"verify_signature": False, "verify_aud": False, "verify_exp": False})
        username = claims.get("username")
        if not username:
            raise jwt.InvalidTokenError("token has no 'username' claim")
        logger.debug(f"Decoded session token for user {username}")
        return cls(username=str(username), jwt=token)
