import uuid

from fastapi import APIRouter, Depends, Form, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.permission_store import SqlPermissionStore
from db.session import get_db
from db.vacancy_store import SqlVacancyStore
from schema.vacancies import UINT64_MAX, Vacancy, VacancyHeader
from service.contracts import PermissionChecker, VacancyStore
from service.vacancies import VacancyHandler
from util.result import Forbidden, NotFound


router = APIRouter(prefix="/vacancies", tags=["vacancies"])


def get_vacancy_store(db: AsyncSession = Depends(get_db)) -> VacancyStore:
    return SqlVacancyStore(db)


def get_permission_checker(db: AsyncSession = Depends(get_db)) -> PermissionChecker:
    return SqlPermissionStore(db)


def get_vacancy_handler(
    store: VacancyStore = Depends(get_vacancy_store),
    permissions: PermissionChecker = Depends(get_permission_checker),
) -> VacancyHandler:
    return VacancyHandler(store, permissions)


def failure_response(outcome) -> Response:
    if isinstance(outcome, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(outcome, Forbidden):
        return Response(status_code=status.HTTP_403_FORBIDDEN)
    raise TypeError(f"Unexpected outcome: {outcome!r}")


@router.get("", response_model=list[VacancyHeader])
async def list_vacancies(handler: VacancyHandler = Depends(get_vacancy_handler)):
    """
    Get all open vacancies as id/title headers.
    """
    outcome = await handler.list_vacancies()
    return outcome.value


@router.get(
    "/{vacancy_id}",
    response_model=Vacancy,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Vacancy not found"}},
)
async def get_vacancy(
    vacancy_id: uuid.UUID, handler: VacancyHandler = Depends(get_vacancy_handler)
):
    """
    Get the full description of a vacancy.
    """
    outcome = await handler.get_vacancy(vacancy_id)
    if isinstance(outcome, (NotFound, Forbidden)):
        return failure_response(outcome)
    return outcome.value


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={status.HTTP_403_FORBIDDEN: {"description": "Cannot manage vacancies"}},
)
async def open_vacancy(
    owner_user_id: int = Form(..., alias="ownerUserId", ge=0, le=UINT64_MAX),
    title: str = Form(...),
    description: str = Form(...),
    handler: VacancyHandler = Depends(get_vacancy_handler),
):
    """
    Open a new vacancy. Requires the owner to be allowed to manage vacancies.
    """
    outcome = await handler.create_vacancy(owner_user_id, title, description)
    if isinstance(outcome, Forbidden):
        return failure_response(outcome)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete(
    "/{vacancy_id}",
    response_class=Response,
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Vacancy is not owned by the caller"},
        status.HTTP_404_NOT_FOUND: {"description": "Vacancy not found"},
    },
)
async def close_vacancy(
    vacancy_id: uuid.UUID,
    owner_id: int = Query(..., alias="ownerId", ge=0, le=UINT64_MAX),
    handler: VacancyHandler = Depends(get_vacancy_handler),
):
    """
    Close (delete) a vacancy owned by the caller.
    """
    outcome = await handler.close_vacancy(vacancy_id, owner_id)
    if isinstance(outcome, (NotFound, Forbidden)):
        return failure_response(outcome)
    return Response(status_code=status.HTTP_200_OK)
