"""
LINE Messaging API webhook.

The platform posts events here; the body is logged by the body dump
middleware and acknowledged with an empty JSON string.
"""

from fastapi import APIRouter

router = APIRouter()


@router.post("/webhook")
async def receive_webhook() -> str:
    return ""
