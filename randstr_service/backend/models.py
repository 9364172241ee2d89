"""Database models."""
from sqlalchemy import Column, Integer, Text

from ..common.constants import TABLE_NAME
from ..data.entities import RandomStringData
from .database import Base


class RandomStringRow(Base):
    """A generated string as stored in the local database."""
    __tablename__ = TABLE_NAME

    id = Column(Integer, primary_key=True, autoincrement=True)
    value = Column(Text, nullable=False)
    length = Column(Integer, nullable=False)
    created = Column(Text, nullable=False)

    @classmethod
    def from_entity(cls, entity: RandomStringData) -> "RandomStringRow":
        return cls(id=entity.id, value=entity.value, length=entity.length, created=entity.created)

    def to_entity(self) -> RandomStringData:
        return RandomStringData(id=self.id, value=self.value, length=self.length, created=self.created)
