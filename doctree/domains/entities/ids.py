import uuid
from dataclasses import dataclass, field
from typing import TypeVar


TId = TypeVar("TId", bound="EntityID")


@dataclass(frozen=True)
class EntityID:
    """Базовый строго типизированный идентификатор"""
    value: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if not isinstance(self.value, uuid.UUID):
            raise TypeError(f"{type(self).__name__} expects uuid.UUID, got {type(self.value).__name__}")

    @classmethod
    def new(cls: type[TId]) -> TId:
        """Генерация нового идентификатора"""
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls: type[TId], raw: str) -> TId:
        """Создание идентификатора из строки"""
        return cls(uuid.UUID(raw))

    def __str__(self) -> str:
        return str(self.value)


# dataclass eq сравнивает и класс, поэтому UserID(u) != DocumentID(u)
@dataclass(frozen=True)
class UserID(EntityID):
    """Идентификатор пользователя"""


@dataclass(frozen=True)
class DocumentID(EntityID):
    """Идентификатор документа"""


@dataclass(frozen=True)
class DocumentNodeID(EntityID):
    """Идентификатор узла дерева документов"""
