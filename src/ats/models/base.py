"""Shared column helpers for the ATS models."""

import uuid


def generate_uuid() -> str:
    """Return a new random UUID string for use as a primary key."""
    return str(uuid.uuid4())
