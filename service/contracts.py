import enum
import uuid
from typing import Protocol

from schema.vacancies import Vacancy, VacancyHeader


class DeleteStatus(enum.Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


class VacancyStore(Protocol):
    async def list_all_vacancy_headers(self) -> list[VacancyHeader]: ...

    async def get_vacancy_by_id(self, vacancy_id: uuid.UUID) -> Vacancy | None: ...

    async def add_vacancy(self, vacancy: Vacancy) -> None: ...

    async def delete_vacancy_by_id(
        self, vacancy_id: uuid.UUID, owner_id: int
    ) -> DeleteStatus:
        """
        Remove the vacancy if it is owned by owner_id.
        Must be atomic with respect to concurrent reads and deletes of the same id.
        """
        ...


class PermissionChecker(Protocol):
    async def can_manage_vacancies(self, user_id: int) -> bool: ...
