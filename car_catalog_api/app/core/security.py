"""
JWT helpers for the LINE channel access token (v2.1) client assertion.

The LINE Messaging API issues channel access tokens in exchange for a
JSON Web Token signed with the channel's private key.  This module
reads that key (a JWK document) from disk and builds the signed
assertion with PyJWT:

* ``sub`` and ``iss`` both carry the channel ID;
* ``aud`` is ``["https://api.line.me/"]``;
* ``exp`` is the assertion expiry, ``EXPJWT`` minutes from now;
* ``token_exp`` is the requested lifetime of the issued access token,
  in seconds (``EXPACC`` days).

The key ID of the JWK is placed in the ``kid`` header so LINE can pick
the matching public key.
"""

import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from jwt import PyJWK

from .config import settings

ALGORITHM = "RS256"
SECONDS_PER_DAY = 60 * 60 * 24


def load_signing_key(path: str) -> PyJWK:
    """Read a private JWK from ``path``.

    Raises ``OSError`` when the file cannot be read, ``ValueError`` when
    it is not a JSON object or not an RSA private key, and
    ``jwt.PyJWTError`` when PyJWT cannot build a key from it.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("JWK must be a JSON object")
    key = PyJWK(data, algorithm=ALGORITHM)
    if not isinstance(key.key, RSAPrivateKey):
        raise ValueError("JWK is not an RSA private key")
    return key


def build_claims(
    channel_id: str,
    audience: Optional[List[str]] = None,
    jwt_expire_minutes: Optional[int] = None,
    access_token_expire_days: Optional[int] = None,
    now: Optional[float] = None,
) -> Dict[str, Any]:
    """Assemble the claim set of the client assertion."""
    issued_at = int(now if now is not None else time.time())
    minutes = jwt_expire_minutes if jwt_expire_minutes is not None else settings.jwt_expire_minutes
    days = access_token_expire_days if access_token_expire_days is not None else settings.access_token_expire_days
    return {
        "sub": channel_id,
        "iss": channel_id,
        "aud": audience or [settings.line_audience],
        "exp": issued_at + minutes * 60,
        "token_exp": SECONDS_PER_DAY * days,
    }


def build_client_assertion(key: PyJWK, channel_id: str, **claim_options: Any) -> str:
    """Sign the claim set for ``channel_id`` with ``key`` using RS256.

    Extra keyword arguments are forwarded to :func:`build_claims`.
    """
    headers = {"typ": "JWT"}
    if key.key_id:
        headers["kid"] = key.key_id
    claims = build_claims(channel_id, **claim_options)
    return jwt.encode(claims, key.key, algorithm=ALGORITHM, headers=headers)
