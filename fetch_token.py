"""Issue a LINE channel access token and print it as JSON.

Uses the same ``KEYPATH``/``CHID``/``EXPJWT``/``EXPACC`` settings as the
server.  Exits with status 1 when the token cannot be obtained.

Usage:
    python fetch_token.py
"""
import logging
import sys

from car_catalog_api.app.core.config import settings
from car_catalog_api.app.core.logging_config import setup_logging
from car_catalog_api.app.services.token_service import TokenFetchError, TokenService

logger = logging.getLogger("fetch_token")


def main() -> int:
    """Fetch a token and print it; return the process exit status."""
    setup_logging(settings.log_level)
    try:
        token = TokenService.fetch_access_token()
    except TokenFetchError:
        logger.exception("Token fetch failed")
        return 1
    print(token.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
