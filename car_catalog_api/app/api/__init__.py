"""
API package containing route definitions.

``router`` groups the ``/api`` endpoints (currently only cars);
the LINE webhook lives at the root and is exposed separately as
``webhook_router``.
"""
