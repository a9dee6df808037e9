import logging
from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response
from fastapi.responses import PlainTextResponse

from movies_api.models.Movie import ID_MAX, ID_MIN
from movies_api.schemas.movie import MovieCreate, MovieResponse
from movies_api.services.movie_service import MoviesService, get_movie_service

logger = logging.getLogger(__name__)

# ids outside the column range are rejected with 422 before reaching the service
MovieId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]

router = APIRouter(
    prefix="/movies",
    tags=["movies"]
)


def server_error(message: str) -> PlainTextResponse:
    # exception text stays in the logs, clients only get the generic message
    return PlainTextResponse(message, status_code=500)


@router.get("", response_model=list[MovieResponse],
            responses={204: {"description": "No movies"}, 500: {"description": "Server error"}})
async def get_movies(service: MoviesService = Depends(get_movie_service)):
    logger.debug("get_movies called")
    try:
        movies = await service.get_movies()
    except Exception as e:
        logger.error("Error fetching movies %s", e)
        return server_error("An error occurred while fetching movies.")
    if not movies:
        return Response(status_code=204)
    return movies


@router.get("/{movie_id}", response_model=MovieResponse,
            responses={404: {"description": "Movie not found"}, 500: {"description": "Server error"}})
async def get_movie_by_id(movie_id: MovieId, service: MoviesService = Depends(get_movie_service)):
    logger.debug("get_movie_by_id called with %s", movie_id)
    try:
        movie = await service.get_movie(movie_id)
    except Exception as e:
        logger.error("Error fetching movie %s. %s", movie_id, e)
        return server_error(f"An error occurred while fetching movie '{movie_id}'.")
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@router.post("", response_model=MovieResponse, status_code=201,
             responses={400: {"description": "Movie could not be created"}, 500: {"description": "Server error"}})
async def create_movie(
        data: MovieCreate,
        request: Request,
        response: Response,
        service: MoviesService = Depends(get_movie_service)):
    logger.debug("create_movie called")
    try:
        movie = await service.add_movie(data.name, data.year_of_release)
    except Exception as e:
        logger.error("Error creating movie %s", e)
        return server_error("An error occurred while creating the movie.")
    if movie is None:
        raise HTTPException(status_code=400, detail="Movie could not be created")
    response.headers["Location"] = str(request.url_for("get_movie_by_id", movie_id=movie.id))
    return movie


@router.delete("/{movie_id}",
               responses={404: {"description": "Movie not found"}, 500: {"description": "Server error"}})
async def delete_movie(movie_id: MovieId, service: MoviesService = Depends(get_movie_service)):
    logger.debug("delete_movie called with %s", movie_id)
    try:
        deleted = await service.delete_movie(movie_id)
    except Exception as e:
        logger.error("Error deleting movie %s %s", movie_id, e)
        return server_error(f"An error occurred while deleting movie {movie_id}.")
    if not deleted:
        raise HTTPException(status_code=404, detail="Movie not found")
    return Response(status_code=200)
