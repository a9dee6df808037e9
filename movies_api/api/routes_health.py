from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from movies_api.db.session import ping


router = APIRouter()


@router.get("/health", summary="Health check endpoint", description="Reports whether the database answers a trivial query.")
async def health_check(request: Request):
    if await ping(request.app.state.engine):
        return {"status": "ok", "database": "ok"}
    return JSONResponse(status_code=503, content={"status": "unavailable", "database": "unreachable"})
