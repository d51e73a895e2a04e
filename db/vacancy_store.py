from datetime import timezone
import uuid

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Vacancy as VacancyRow
from schema.vacancies import Vacancy, VacancyHeader
from service.contracts import DeleteStatus


def to_schema(row: VacancyRow) -> Vacancy:
    created = row.created
    # sqlite drops the tz info on the way back
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return Vacancy(
        id=row.id,
        owner_user_id=row.owner_user_id,
        title=row.title,
        description=row.description,
        created=created,
    )


class SqlVacancyStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all_vacancy_headers(self) -> list[VacancyHeader]:
        result = await self.db.execute(select(VacancyRow.id, VacancyRow.title))
        return [VacancyHeader(id=row.id, title=row.title) for row in result.all()]

    async def get_vacancy_by_id(self, vacancy_id: uuid.UUID) -> Vacancy | None:
        row = await self.db.get(VacancyRow, vacancy_id)
        if row is None:
            return None
        return to_schema(row)

    async def add_vacancy(self, vacancy: Vacancy) -> None:
        self.db.add(
            VacancyRow(
                id=vacancy.id,
                owner_user_id=vacancy.owner_user_id,
                title=vacancy.title,
                description=vacancy.description,
                created=vacancy.created,
            )
        )
        await self.db.commit()

    async def delete_vacancy_by_id(
        self, vacancy_id: uuid.UUID, owner_id: int
    ) -> DeleteStatus:
        result = await self.db.execute(
            delete(VacancyRow).where(
                VacancyRow.id == vacancy_id, VacancyRow.owner_user_id == owner_id
            )
        )
        if result.rowcount:
            await self.db.commit()
            return DeleteStatus.DELETED

        still_there = await self.db.scalar(
            select(exists().where(VacancyRow.id == vacancy_id))
        )
        await self.db.commit()
        if still_there:
            return DeleteStatus.FORBIDDEN
        return DeleteStatus.NOT_FOUND
