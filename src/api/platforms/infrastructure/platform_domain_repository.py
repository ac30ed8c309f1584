"""PostgreSQL implementation of IPlatformDomainRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from platforms.domain.aggregates import PlatformDomain
from platforms.domain.value_objects import DomainStatus, VerificationMethod
from platforms.infrastructure.models import PlatformDomainModel
from platforms.infrastructure.observability import (
    DefaultPlatformRepositoryProbe,
    PlatformRepositoryProbe,
)
from platforms.ports.exceptions import DomainNotFoundError, DuplicateDomainError
from platforms.ports.repositories import IPlatformDomainRepository


def _to_domain(model: PlatformDomainModel) -> PlatformDomain:
    return PlatformDomain(
        id=model.id,
        platform_id=model.platform_id,
        domain=model.domain,
        verification_token=model.verification_token,
        verification_method=VerificationMethod(model.verification_method),
        status=DomainStatus(model.status),
        verified_at=model.verified_at,
        created_at=model.created_at,
    )


class PlatformDomainRepository(IPlatformDomainRepository):
    """Repository managing PostgreSQL storage for custom domain registrations."""

    def __init__(
        self,
        session: AsyncSession,
        probe: PlatformRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultPlatformRepositoryProbe()

    async def save(self, record: PlatformDomain) -> PlatformDomain:
        """Insert or update a registration.

        Raises:
            DomainNotFoundError: If updating a registration that no longer exists
            DuplicateDomainError: If the domain is registered already
        """
        try:
            if record.id is None:
                model = PlatformDomainModel(
                    platform_id=record.platform_id,
                    domain=record.domain,
                    verification_token=record.verification_token,
                    verification_method=record.verification_method.value,
                    status=record.status.value,
                    verified_at=record.verified_at,
                )
                self._session.add(model)
            else:
                model = await self._get_model(record.id)
                if model is None:
                    raise DomainNotFoundError(f"Domain '{record.domain}' not found")
                model.status = record.status.value
                model.verified_at = record.verified_at
                model.verification_token = record.verification_token

            await self._session.flush()

        except IntegrityError as e:
            if "ix_platform_domains_domain" in str(e):
                self._probe.duplicate_key_detected("domain", record.domain)
                raise DuplicateDomainError(
                    f"Domain '{record.domain}' is already in use"
                ) from e
            raise

        record.id = model.id
        record.created_at = model.created_at
        self._probe.domain_registration_saved(record.platform_id, record.domain)
        return record

    async def _get_model(self, record_id: int) -> PlatformDomainModel | None:
        stmt = select(PlatformDomainModel).where(PlatformDomainModel.id == record_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get(self, platform_id: int, domain: str) -> PlatformDomain | None:
        """Fetch the registration of ``domain`` for one platform."""
        stmt = select(PlatformDomainModel).where(
            PlatformDomainModel.platform_id == platform_id,
            PlatformDomainModel.domain == domain,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model is not None else None

    async def get_by_domain(self, domain: str) -> PlatformDomain | None:
        """Fetch the registration of ``domain`` for any platform."""
        stmt = select(PlatformDomainModel).where(PlatformDomainModel.domain == domain)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model is not None else None

    async def list_by_platform(self, platform_id: int) -> list[PlatformDomain]:
        """List registrations of a platform ordered by id."""
        stmt = (
            select(PlatformDomainModel)
            .where(PlatformDomainModel.platform_id == platform_id)
            .order_by(PlatformDomainModel.id)
        )
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def delete(self, record: PlatformDomain) -> bool:
        """Delete a registration."""
        if record.id is None:
            return False
        model = await self._get_model(record.id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.domain_registration_deleted(record.platform_id, record.domain)
        return True
