import jwt
import pytest

from car_catalog_api.app.core import security


def test_load_signing_key_reads_kid(jwk_file):
    key = security.load_signing_key(str(jwk_file))
    assert key.key_id == "test-kid"


def test_load_signing_key_missing_file(tmp_path):
    with pytest.raises(OSError):
        security.load_signing_key(str(tmp_path / "nope.key"))


def test_build_claims():
    claims = security.build_claims(
        "1234567890",
        jwt_expire_minutes=30,
        access_token_expire_days=2,
        now=1_700_000_000,
    )
    assert claims == {
        "sub": "1234567890",
        "iss": "1234567890",
        "aud": ["https://api.line.me/"],
        "exp": 1_700_000_000 + 30 * 60,
        "token_exp": 2 * 86400,
    }


def test_client_assertion_claims_and_header(jwk_file, rsa_private_key):
    key = security.load_signing_key(str(jwk_file))
    token = security.build_client_assertion(key, "1234567890")

    header = jwt.get_unverified_header(token)
    assert header["alg"] == "RS256"
    assert header["kid"] == "test-kid"

    claims = jwt.decode(
        token,
        rsa_private_key.public_key(),
        algorithms=["RS256"],
        audience="https://api.line.me/",
        issuer="1234567890",
    )
    assert claims["sub"] == "1234567890"
    assert claims["aud"] == ["https://api.line.me/"]
    assert claims["token_exp"] == 30 * 86400


def test_client_assertion_expiry_follows_settings(jwk_file, monkeypatch):
    monkeypatch.setattr(security.settings, "jwt_expire_minutes", 5)
    key = security.load_signing_key(str(jwk_file))
    token = security.build_client_assertion(key, "42", now=1_000)
    claims = jwt.decode(token, options={"verify_signature": False})
    assert claims["exp"] == 1_000 + 5 * 60


@pytest.mark.parametrize("kind", ["not_an_object", "public_only_rsa", "ec_private"])
def test_load_signing_key_rejects_unusable_keys(write_jwk, bad_jwks, kind):
    path = write_jwk(bad_jwks[kind])
    with pytest.raises((ValueError, jwt.PyJWTError)):
        security.load_signing_key(str(path))
