"""Donor repository: inserts, name lookup, and PMM listing."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from donor_tracker.application.dtos.donor import DonorCreate, DonorResult
from donor_tracker.infrastructure.persistence.models.donor import Donor
from donor_tracker.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(d: Donor) -> DonorResult:
    """Map Donor ORM to DonorResult DTO."""
    return DonorResult(
        donor_id=d.donor_id,
        first_name=d.first_name,
        nick_name=d.nick_name,
        last_name=d.last_name,
        pmm=d.pmm,
        organization_name=d.organization_name,
        city=d.city,
        total_donations=d.total_donations,
        created_at=d.created_at,
    )


def _to_model(data: DonorCreate) -> Donor:
    return Donor(
        first_name=data.first_name,
        nick_name=data.nick_name,
        last_name=data.last_name,
        pmm=data.pmm,
        organization_name=data.organization_name,
        city=data.city,
        total_donations=data.total_donations,
    )


class DonorRepository(BaseRepository[Donor]):
    """Insert and read donors."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Donor)

    async def create_donor(self, data: DonorCreate) -> int:
        """Insert one donor and return its id."""
        donor = await self.create(_to_model(data))
        return donor.donor_id

    async def create_donors(self, items: Sequence[DonorCreate]) -> list[int]:
        """Insert donors in one flush and return their ids in input order."""
        donors = await self.create_many([_to_model(item) for item in items])
        return [d.donor_id for d in donors]

    async def get_donor(self, donor_id: int) -> DonorResult | None:
        donor = await self.get_by_id(donor_id)
        return _to_result(donor) if donor else None

    async def list_donors(self) -> list[DonorResult]:
        return [_to_result(d) for d in await self.get_all()]

    async def find_by_name(
        self, first_name: str | None, last_name: str | None
    ) -> DonorResult | None:
        """Return the earliest donor with this first and last name, or None.

        None matches NULL so donors imported without a name part can still
        be de-duplicated.
        """
        stmt = (
            select(Donor)
            .where(
                Donor.first_name.is_(None) if first_name is None else Donor.first_name == first_name,
                Donor.last_name.is_(None) if last_name is None else Donor.last_name == last_name,
            )
            .order_by(Donor.donor_id)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        donor = result.scalar_one_or_none()
        return _to_result(donor) if donor else None

    async def list_pmms(self) -> list[str]:
        """Return distinct PMM names, sorted."""
        result = await self.db.execute(
            select(Donor.pmm).distinct().order_by(Donor.pmm)
        )
        return list(result.scalars().all())
