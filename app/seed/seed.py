import logging
from typing import List, Optional, Tuple, Type
from seed.factories.base import BaseFactory

logger = logging.getLogger(__name__)


class Seeder:
    async def seed_all(
        self,
        factory_classes: List[Tuple[Type[BaseFactory], Optional[int]]],
    ) -> None:
        """
        Seed all models using their respective factories.

        :param factory_classes: List of tuples where each tuple contains a factory class and the count of records to seed.
        """
        for FactoryClass, count in factory_classes:
            logger.info("Seeding %s %s", count, FactoryClass.__name__)
            factory = FactoryClass()
            if factory.reset:
                await factory.drop_all()
            await factory.seed(count)
            logger.info("Seeding %s complete", FactoryClass.__name__)
