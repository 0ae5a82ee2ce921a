"""Identifier helpers shared by repositories and use cases."""

from uuid import uuid4


def new_id() -> str:
    """Return a new opaque identifier suitable for any persisted entity."""

    return uuid4().hex


__all__ = ["new_id"]
