from abc import ABC, abstractmethod
from typing import Optional, Type
from advanced_alchemy.repository import SQLAlchemyAsyncRepository


class BaseFactory(ABC):
    repository: Type[SQLAlchemyAsyncRepository]
    # Whether the seeder clears previous rows before seeding.
    reset: bool = True

    @abstractmethod
    async def seed(self, count: Optional[int]) -> None:
        """Insert a specified number of rows into the table."""
        pass

    @abstractmethod
    async def drop_all(self) -> None:
        """Delete all rows previously created by this factory."""
        pass
