import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from movies_api.core.config import get_settings
from movies_api.core.logging_setup import setup_logging
from movies_api.db.session import create_engine, create_session_factory, init_db
from movies_api.models import Movie

logger = logging.getLogger(__name__)

SEED_MOVIES = [
    ("Gone With The Wind", 1939),
    ("Back To The Future", 1985),
]


async def seed(session: AsyncSession) -> list[Movie]:
    movies = [Movie(name=name, year_of_release=year) for name, year in SEED_MOVIES]
    session.add_all(movies)
    await session.commit()
    return movies


async def main():
    settings = get_settings()
    setup_logging(settings)
    engine = create_engine(settings)
    try:
        # Ensure tables exist (for dev only)
        await init_db(engine)
        async with create_session_factory(engine)() as session:
            movies = await seed(session)
        logger.info("Seeded %d movies", len(movies))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
