"""User aggregate.

The ledger only knows a user by an opaque id and a password hash produced
by the authentication layer.
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    id: str = Field(min_length=1)
    password_hash: str

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        # never print the hash
        return f"User(id={self.id!r})"
