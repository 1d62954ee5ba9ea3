import random
from typing import Optional
from faker import Faker
from configs.sqlalchemy import sqlalchemy_config
from database.models.visit_report import VisitReport, VisitStatus
from domains.visits.service import VisitReportRepository
from seed.factories.base import BaseFactory

fake = Faker("en_IN")

SEED_SOURCE = "demo-seed"

LOCATION_CODES = ["KO01", "KO02", "PU01", "BL01", "HY01"]


def fake_property_info() -> dict:
    return {
        "name": f"{fake.last_name()} Residency",
        "address": fake.address().replace("\n", ", "),
        "locationCode": random.choice(LOCATION_CODES),
        "ownerName": fake.name(),
        "ownerEmail": fake.unique.email(),
        "contactPhone": fake.msisdn()[:10],
        "source": SEED_SOURCE,
    }


class VisitReportFactory(BaseFactory):
    """Submitted field visit reports waiting for review.

    Rows are tagged with ``source`` so a reseed only replaces its own unreviewed
    reports and never real ones.
    """

    repository = VisitReportRepository

    async def seed(self, count: Optional[int] = 10) -> None:
        async with sqlalchemy_config.get_session() as session:
            try:
                await self.repository(session=session).add_many(
                    [
                        VisitReport(
                            property_info=fake_property_info(),
                            status=VisitStatus.SUBMITTED,
                        )
                        for _ in range(count or 0)
                    ]
                )
            except Exception:
                await session.rollback()
                raise
            await session.commit()

    async def drop_all(self) -> None:
        async with sqlalchemy_config.get_session() as session:
            await self.repository(session=session).delete_where(
                VisitReport.status == VisitStatus.SUBMITTED,
                VisitReport.property_info["source"].as_string() == SEED_SOURCE,
            )
            await session.commit()
