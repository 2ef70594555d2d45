"""User accounts stored in the ``users`` table."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field

from ....common.security import get_password_hash, verify_password
from .common import TimestampMixin


class User(TimestampMixin, table=True):
    """Persistent user model."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(
        max_length=150,
        sa_column=sa.Column(sa.String(length=150), nullable=False, unique=True, index=True),
    )
    password_hash: str = Field(
        max_length=200,
        sa_column=sa.Column(sa.String(length=200), nullable=False),
    )

    def set_password(self, password: str) -> None:
        self.password_hash = get_password_hash(password)

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)


__all__ = ["User"]
