"""SQLModel tables backing local storage."""

from sqlmodel import Field, SQLModel  # type: ignore


class KeyValueEntry(SQLModel, table=True):
    """A single named byte value, overwritten in full on every write."""

    key: str = Field(primary_key=True)
    value: bytes
