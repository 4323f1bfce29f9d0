"""
Pydantic schema for the LINE channel access token response.

Mirrors the JSON returned by ``POST /oauth2/v2.1/token``.
"""

from pydantic import BaseModel, Field


class ChannelAccessToken(BaseModel):
    """Channel access token issued by the LINE platform."""

    access_token: str = Field(..., description="Channel access token")
    token_type: str = Field(..., description="Always ``Bearer``")
    expires_in: int = Field(..., description="Seconds until the token expires")
    key_id: str = Field(..., description="Unique key ID identifying the token")
