"""
Service layer abstraction.

``car_service`` owns car storage (SQLite or in‑memory) and
``token_service`` performs the LINE channel access token exchange.
API handlers only talk to these services.
"""
