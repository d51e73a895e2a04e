from sqlalchemy.ext.asyncio import AsyncSession

from db.models import UserPermission


class SqlPermissionStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def can_manage_vacancies(self, user_id: int) -> bool:
        permission = await self.db.get(UserPermission, user_id)
        return permission is not None and permission.can_manage_vacancies

    async def grant_vacancy_management(self, user_id: int, allowed: bool = True) -> None:
        permission = await self.db.get(UserPermission, user_id)
        if permission is None:
            permission = UserPermission(user_id=user_id)
            self.db.add(permission)
        permission.can_manage_vacancies = allowed
        await self.db.commit()
