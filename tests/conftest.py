import json
import os
import tempfile
from pathlib import Path

# Settings are read at import time, so point them at throwaway values
# before the application is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="car_catalog_api_")
os.environ["DATABASE_URL"] = os.path.join(_TMP_DIR, "cars.db")
os.environ["CAR_STORAGE"] = "sqlite"
os.environ["KEYPATH"] = ""
os.environ["CHID"] = "1234567890"
os.environ["EXPJWT"] = "30"
os.environ["EXPACC"] = "30"

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi.testclient import TestClient
from jwt.algorithms import RSAAlgorithm

from car_catalog_api.app.core.config import settings
from car_catalog_api.app.main import app


@pytest.fixture(autouse=True)
def _isolated_database(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "cars.db"))
    monkeypatch.setattr(settings, "car_storage", "sqlite")
    monkeypatch.setattr(settings, "key_path", "")


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def memory_client(monkeypatch):
    monkeypatch.setattr(settings, "car_storage", "memory")
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture()
def jwk_file(tmp_path: Path, rsa_private_key):
    jwk = json.loads(RSAAlgorithm.to_jwk(rsa_private_key))
    jwk.update({"kid": "test-kid", "alg": "RS256", "use": "sig"})
    path = tmp_path / "private.key"
    path.write_text(json.dumps(jwk), encoding="utf-8")
    return path


@pytest.fixture()
def write_jwk(tmp_path: Path):
    """Write ``payload`` as JSON to a key file and return its path."""

    def _write(payload, name="key.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def bad_jwks(rsa_private_key):
    """Key files that are valid JSON but cannot sign an RS256 assertion."""
    from cryptography.hazmat.primitives.asymmetric import ec
    from jwt.algorithms import ECAlgorithm

    ec_key = ec.generate_private_key(ec.SECP256R1())
    return {
        "not_an_object": [],
        "public_only_rsa": json.loads(RSAAlgorithm.to_jwk(rsa_private_key.public_key())),
        "ec_private": json.loads(ECAlgorithm.to_jwk(ec_key)),
    }
