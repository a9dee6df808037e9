from typing import Optional
from sqlalchemy import delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from movies_api.core.exceptions import StoreError
from movies_api.models.Movie import ID_MAX, ID_MIN, Movie

# driver level connection failures (refused, DNS, timeouts) are not always wrapped by SQLAlchemy
STORE_FAILURES = (SQLAlchemyError, OSError)


class CRUDMovie:
    """Data access for the movies table.

    A missing row is never an error: lookups return None and deletes
    return False. Anything the database itself fails on is raised as
    StoreError.
    """

    async def find_by_id(self, db: AsyncSession, movie_id: int) -> Optional[Movie]:
        if not ID_MIN <= movie_id <= ID_MAX:
            # cannot be a stored id, and drivers refuse to bind it
            return None
        try:
            result = await db.execute(select(Movie).where(Movie.id == movie_id))
            return result.scalar_one_or_none()
        except STORE_FAILURES as e:
            raise StoreError(f"Error fetching movie {movie_id}: {e}") from e

    async def find_all(self, db: AsyncSession) -> list[Movie]:
        try:
            result = await db.execute(select(Movie).order_by(Movie.id))
            return list(result.scalars().all())
        except STORE_FAILURES as e:
            raise StoreError(f"Error fetching movies: {e}") from e

    async def insert(self, db: AsyncSession, name: str, year_of_release: int) -> Movie:
        movie = Movie(name=name, year_of_release=year_of_release)
        try:
            db.add(movie)
            # flush fetches id and created_at, commit is the last statement that can fail
            await db.flush()
            await db.commit()
        except STORE_FAILURES as e:
            await self._rollback(db)
            raise StoreError(f"Error creating movie: {e}") from e
        return movie

    async def delete_by_id(self, db: AsyncSession, movie_id: int) -> bool:
        if not ID_MIN <= movie_id <= ID_MAX:
            return False
        try:
            result = await db.execute(delete(Movie).where(Movie.id == movie_id))
            await db.commit()
            return result.rowcount == 1
        except STORE_FAILURES as e:
            await self._rollback(db)
            raise StoreError(f"Error deleting movie {movie_id}: {e}") from e

    async def count(self, db: AsyncSession) -> int:
        try:
            return await db.scalar(select(func.count()).select_from(Movie))
        except STORE_FAILURES as e:
            raise StoreError(f"Error counting movies: {e}") from e

    async def _rollback(self, db: AsyncSession) -> None:
        try:
            await db.rollback()
        except STORE_FAILURES:
            # connection is already gone, nothing left to undo
            pass


crud_movie = CRUDMovie()
