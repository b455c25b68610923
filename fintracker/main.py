import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fintracker.core.config import LOG_LEVEL
from fintracker.core.exceptions import (
    BadRequestError,
    FirestoreError,
    NotFoundError,
    UnauthenticatedError,
)
from fintracker.routers import budgets, transactions, web_api

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="fintracker API", version="1.0.0")

app.include_router(web_api.router)
app.include_router(budgets.router)
app.include_router(transactions.router)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(404, exc)


@app.exception_handler(BadRequestError)
async def bad_request_handler(request: Request, exc: BadRequestError):
    return _error(400, exc)


@app.exception_handler(UnauthenticatedError)
async def unauthenticated_handler(request: Request, exc: UnauthenticatedError):
    return _error(401, exc)


@app.exception_handler(FirestoreError)
async def firestore_error_handler(request: Request, exc: FirestoreError):
    logger.error(f"Firestore error on {request.url.path}: {exc}")
    return _error(503, exc)


@app.get("/")
def home():
    return {"status": "fintracker API online"}
