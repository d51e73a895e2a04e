import asyncio
import uuid

from schema.vacancies import Vacancy, VacancyHeader
from service.contracts import DeleteStatus


class InMemoryVacancyStore:
    def __init__(self):
        self.vacancies: dict[uuid.UUID, Vacancy] = {}
        self.lock = asyncio.Lock()

    async def list_all_vacancy_headers(self) -> list[VacancyHeader]:
        return [vacancy.header() for vacancy in self.vacancies.values()]

    async def get_vacancy_by_id(self, vacancy_id: uuid.UUID) -> Vacancy | None:
        return self.vacancies.get(vacancy_id)

    async def add_vacancy(self, vacancy: Vacancy) -> None:
        async with self.lock:
            self.vacancies[vacancy.id] = vacancy

    async def delete_vacancy_by_id(
        self, vacancy_id: uuid.UUID, owner_id: int
    ) -> DeleteStatus:
        async with self.lock:
            vacancy = self.vacancies.get(vacancy_id)
            if vacancy is None:
                return DeleteStatus.NOT_FOUND
            if vacancy.owner_user_id != owner_id:
                return DeleteStatus.FORBIDDEN
            del self.vacancies[vacancy_id]
            return DeleteStatus.DELETED


class StaticPermissions:
    def __init__(self, managers=()):
        self.managers = set(managers)
        self.checked: list[int] = []

    async def can_manage_vacancies(self, user_id: int) -> bool:
        self.checked.append(user_id)
        return user_id in self.managers
