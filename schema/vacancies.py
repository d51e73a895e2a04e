from datetime import datetime, timezone
import uuid

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


UINT64_MAX = 2**64 - 1


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VacancyHeader(CamelModel):
    id: uuid.UUID
    title: str


class Vacancy(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: uuid.UUID
    owner_user_id: int = Field(ge=0, le=UINT64_MAX)
    title: str
    description: str
    created: datetime

    @classmethod
    def open(cls, owner_user_id: int, title: str, description: str) -> "Vacancy":
        """
        Build a brand new vacancy. Id and creation time are always assigned here.
        """
        return cls(
            id=uuid.uuid4(),
            owner_user_id=owner_user_id,
            title=title,
            description=description,
            created=datetime.now(timezone.utc),
        )

    def header(self) -> VacancyHeader:
        return VacancyHeader(id=self.id, title=self.title)
