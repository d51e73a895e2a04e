import logging
import uuid

from schema.vacancies import Vacancy, VacancyHeader
from service.contracts import DeleteStatus, PermissionChecker, VacancyStore
from util.result import Forbidden, NotFound, Ok, Result


logger = logging.getLogger(__name__)


class VacancyHandler:
    """
    Request handling for vacancies. Delegates persistence to the store and
    reports outcomes as Ok / NotFound / Forbidden.
    """

    def __init__(self, store: VacancyStore, permissions: PermissionChecker):
        self.store = store
        self.permissions = permissions

    async def list_vacancies(self) -> Ok[list[VacancyHeader]]:
        headers = await self.store.list_all_vacancy_headers()
        return Ok(headers)

    async def get_vacancy(self, vacancy_id: uuid.UUID) -> Result[Vacancy]:
        vacancy = await self.store.get_vacancy_by_id(vacancy_id)
        if vacancy is None:
            logger.debug(f"Tried to find the vacancy but not found. Id: {vacancy_id}")
            return NotFound(f"Vacancy {vacancy_id} not found")
        return Ok(vacancy)

    async def create_vacancy(
        self, owner_user_id: int, title: str, description: str
    ) -> Result[Vacancy]:
        if not await self.permissions.can_manage_vacancies(owner_user_id):
            logger.warning(
                f"User without vacancy management permission tried to open a vacancy. User: {owner_user_id}"
            )
            return Forbidden(f"User {owner_user_id} cannot manage vacancies")

        vacancy = Vacancy.open(owner_user_id, title, description)
        await self.store.add_vacancy(vacancy)

        logger.debug(f"Created new vacancy. Id: {vacancy.id}")
        return Ok(vacancy)

    async def close_vacancy(self, vacancy_id: uuid.UUID, owner_id: int) -> Result[None]:
        # ownership is enforced by the store
        status = await self.store.delete_vacancy_by_id(vacancy_id, owner_id)
        if status is DeleteStatus.NOT_FOUND:
            logger.warning(f"Tried to close not existing vacancy. Id: {vacancy_id}")
            return NotFound(f"Vacancy {vacancy_id} not found")
        if status is DeleteStatus.FORBIDDEN:
            logger.warning(f"Tried to close not owned vacancy. Id: {vacancy_id}")
            return Forbidden(f"Vacancy {vacancy_id} is not owned by {owner_id}")
        return Ok(None)
