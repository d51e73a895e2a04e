from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    String,
    TypeDecorator,
    Uuid,
)
from sqlalchemy.orm import mapped_column, Mapped
from datetime import datetime, timezone
import uuid

from .base import Base


class UInt64(TypeDecorator):
    """
    Unsigned 64-bit integer stored in a signed BIGINT column.
    Values are shifted by 2**63 so the full range fits and ordering is kept.
    """

    impl = BigInteger
    cache_ok = True

    OFFSET = 2**63

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return value - self.OFFSET

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return value + self.OFFSET


class Vacancy(Base):
    __tablename__ = "vacancies"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, index=True)
    owner_user_id: Mapped[int] = mapped_column(UInt64, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class UserPermission(Base):
    __tablename__ = "user_permissions"

    user_id: Mapped[int] = mapped_column(UInt64, primary_key=True)
    can_manage_vacancies: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
