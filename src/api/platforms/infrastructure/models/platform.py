"""SQLAlchemy ORM model for the trading_platforms table."""

from typing import Any

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin


class TradingPlatformModel(Base, TimestampMixin):
    """ORM model for trading_platforms table.

    Note: slug, subdomain and custom_domain are globally unique. The unique
    indexes on subdomain and custom_domain are what guarantees a hostname
    maps to at most one platform.
    """

    __tablename__ = "trading_platforms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    subdomain: Mapped[str | None] = mapped_column(
        String(63), nullable=True, unique=True, index=True
    )
    custom_domain: Mapped[str | None] = mapped_column(
        String(253), nullable=True, unique=True, index=True
    )
    template_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    config: Mapped[dict[str, Any]] = mapped_column(nullable=False)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    domains = relationship(
        "PlatformDomainModel",
        back_populates="platform",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<TradingPlatformModel(id={self.id}, slug={self.slug}, "
            f"subdomain={self.subdomain}, custom_domain={self.custom_domain})>"
        )
