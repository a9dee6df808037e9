import logging
from typing import Optional, Protocol

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movies_api.crud.movie import CRUDMovie, crud_movie
from movies_api.db.session import get_db_session
from movies_api.models.Movie import Movie


class MoviesService(Protocol):
    async def get_movie(self, movie_id: int) -> Optional[Movie]: ...

    async def get_movies(self) -> list[Movie]: ...

    async def add_movie(self, name: str, year_of_release: int) -> Optional[Movie]: ...

    async def delete_movie(self, movie_id: int) -> bool: ...


class MovieService:
    """
    Sits between the routes and the repository.

    Reads let StoreError escape so the route can answer 500. Writes log
    the failure and return None / False instead, which means a caller of
    delete_movie cannot tell "not there" from "database down". API
    clients see 400/404 for these, not 500.
    """

    def __init__(self, db: AsyncSession, repository: CRUDMovie = crud_movie, logger: Optional[logging.Logger] = None):
        self.db = db
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    async def get_movie(self, movie_id: int) -> Optional[Movie]:
        self.logger.debug("Getting movie %s", movie_id)
        return await self.repository.find_by_id(self.db, movie_id)

    async def get_movies(self) -> list[Movie]:
        self.logger.debug("Getting movies")
        return await self.repository.find_all(self.db)

    async def add_movie(self, name: str, year_of_release: int) -> Optional[Movie]:
        self.logger.debug("Adding movie %s %s", name, year_of_release)
        try:
            return await self.repository.insert(self.db, name, year_of_release)
        except Exception as e:
            self.logger.error("Error adding movie %s", e)
            return None

    async def delete_movie(self, movie_id: int) -> bool:
        self.logger.debug("Deleting movie %s", movie_id)
        try:
            return await self.repository.delete_by_id(self.db, movie_id)
        except Exception as e:
            self.logger.error("Error deleting movie %s %s", movie_id, e)
            return False


def get_movie_service(db: AsyncSession = Depends(get_db_session)) -> MoviesService:
    return MovieService(db)
