"""SQLAlchemy ORM model for the platform_domains table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, CreatedAtMixin


class PlatformDomainModel(Base, CreatedAtMixin):
    """ORM model for platform_domains table.

    One row per custom domain registration. Rows are removed together with
    their platform.
    """

    __tablename__ = "platform_domains"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    platform_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("trading_platforms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    domain: Mapped[str] = mapped_column(
        String(253), nullable=False, unique=True, index=True
    )
    verification_token: Mapped[str] = mapped_column(String(64), nullable=False)
    verification_method: Mapped[str] = mapped_column(String(16), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    platform = relationship("TradingPlatformModel", back_populates="domains")

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<PlatformDomainModel(id={self.id}, platform_id={self.platform_id}, "
            f"domain={self.domain}, status={self.status})>"
        )
