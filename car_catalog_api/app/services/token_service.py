"""
LINE channel access token (v2.1) exchange.

The flow is a straight sequence with no retry, caching or refresh:

1. read the private JWK from ``settings.key_path``;
2. build and sign the client assertion (see ``core.security``);
3. POST it to ``settings.line_token_url`` as an
   ``application/x-www-form-urlencoded`` body;
4. decode the JSON response into :class:`ChannelAccessToken`.

Every failure along the way is raised as :class:`TokenFetchError` so the
caller can log it and stop.

Reference: https://developers.line.biz/en/reference/messaging-api/#issue-channel-access-token-v2-1
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import jwt
import requests
from pydantic import ValidationError

from car_catalog_api.app.core.config import settings
from car_catalog_api.app.core.security import build_client_assertion, load_signing_key
from car_catalog_api.app.schemas.token import ChannelAccessToken

logger = logging.getLogger(__name__)

GRANT_TYPE = "client_credentials"
CLIENT_ASSERTION_TYPE = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"


class TokenFetchError(RuntimeError):
    """Raised when a channel access token cannot be obtained."""


class TokenService:
    """Obtain channel access tokens from the LINE OAuth endpoint."""

    @classmethod
    def build_request_body(cls, assertion: str) -> Dict[str, str]:
        return {
            "grant_type": GRANT_TYPE,
            "client_assertion_type": CLIENT_ASSERTION_TYPE,
            "client_assertion": assertion,
        }

    @classmethod
    def create_assertion(cls) -> str:
        """Load the configured key and sign a client assertion with it."""
        if not settings.key_path:
            raise TokenFetchError("KEYPATH is not configured")
        if not settings.channel_id:
            raise TokenFetchError("CHID is not configured")
        try:
            key = load_signing_key(settings.key_path)
        except (OSError, ValueError, jwt.PyJWTError) as exc:
            raise TokenFetchError(f"Cannot load signing key {settings.key_path}: {exc}") from exc
        try:
            return build_client_assertion(key, settings.channel_id)
        except (jwt.PyJWTError, ValueError) as exc:
            raise TokenFetchError(f"Cannot sign client assertion: {exc}") from exc

    @classmethod
    def fetch_access_token(cls) -> ChannelAccessToken:
        """Issue a new channel access token.

        Returns
        -------
        ChannelAccessToken
            The decoded token response.

        Raises
        ------
        TokenFetchError
            If the key cannot be loaded, the request fails, LINE answers
            with a non‑2xx status or the body is not a token response.
        """
        assertion = cls.create_assertion()
        try:
            resp = requests.post(
                settings.line_token_url,
                data=cls.build_request_body(assertion),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=settings.http_timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            detail = _response_text(getattr(exc, "response", None))
            raise TokenFetchError(f"Token request failed: {exc} {detail}".rstrip()) from exc

        try:
            payload: Any = resp.json()
            token = ChannelAccessToken.model_validate(payload)
        except (ValueError, ValidationError) as exc:
            raise TokenFetchError(f"Unexpected token response: {exc}") from exc

        logger.info(
            "Issued channel access token key_id=%s type=%s expires_in=%s",
            token.key_id,
            token.token_type,
            token.expires_in,
        )
        return token


def _response_text(resp: requests.Response | None) -> str:
    return resp.text if resp is not None else ""
