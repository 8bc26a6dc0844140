"""Identifier generation for members and attendance records."""
import uuid


def new_id() -> str:
    """Return a new opaque identifier."""
    return uuid.uuid4().hex
