"""Data Access Object for the local key-value store."""

from sqlmodel import Session

from src.models.tables import KeyValueEntry


def get_value(session: Session, key: str) -> bytes | None:
    """Get the bytes stored under a key, or None if the key is absent."""
    entry = session.get(KeyValueEntry, key)
    if entry is None:
        return None
    return entry.value


def set_value(session: Session, key: str, value: bytes) -> KeyValueEntry:
    """Store bytes under a key, replacing any previous value in full."""
    entry = session.get(KeyValueEntry, key)
    if entry is None:
        entry = KeyValueEntry(key=key, value=value)
    else:
        entry.value = value
    session.add(entry)
    return entry
