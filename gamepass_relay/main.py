# gamepass_relay/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gamepass_relay import __version__
from gamepass_relay.api.gamepasses import InvalidUserIdError, router as gamepasses_router
from gamepass_relay.models.gamepasses import ErrorOut

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Game Pass Relay",
    version=__version__,
)


@app.exception_handler(InvalidUserIdError)
async def invalid_user_id_handler(request: Request, exc: InvalidUserIdError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content=ErrorOut().model_dump())


@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(gamepasses_router)
