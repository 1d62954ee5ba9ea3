from typing import Any
from configs.sqlalchemy import sqlalchemy_config


async def insert(*instances: Any) -> None:
    """Persist rows in a short-lived session so SQLite is unlocked afterwards."""
    async with sqlalchemy_config.get_session() as session:
        session.add_all(instances)
        await session.commit()


async def fetch_all(query: Any) -> list[Any]:
    async with sqlalchemy_config.get_session() as session:
        return list((await session.scalars(query)).unique().all())


async def fetch_one(query: Any) -> Any:
    rows = await fetch_all(query)
    assert len(rows) == 1, f"expected one row, got {len(rows)}"
    return rows[0]
