import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .config import Settings, configure_logging, get_settings
from .db import Database
from .schemas import (
    BoardIn,
    BoardOut,
    BoardSummary,
    CardIn,
    CardOut,
    CardSummary,
    ErrorEnvelope,
    Health,
    ListIn,
    ListOut,
    ListSummary,
    MemberIn,
    MemberOut,
    UserIn,
    UserOut,
    field_violations,
)
from .storage import Storage
from .utils import new_uuid

logger = logging.getLogger(__name__)


# === Helpers ===


def get_storage(request: Request) -> Storage:
    return Storage(request.app.state.db)


def error_response(status_code: int, code: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    body = ErrorEnvelope(code=code, message=message, details=details, requestId=new_uuid())
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [v.model_dump() for v in field_violations(exc.errors())]
    return error_response(422, "validation_error", "request validation failed", {"errors": errors})


async def on_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("%s %s rejected by constraint: %s", request.method, request.url.path, exc.orig)
    return error_response(409, "conflict", "write violates a uniqueness or reference constraint")


async def on_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(503, "database_unavailable", "database operation failed")


router = APIRouter()


# === Health ===


@router.get("/health", response_model=Health)
async def health() -> Health:
    return Health()


# === User endpoints ===


@router.get("/users", response_model=list[UserOut])
async def list_users(storage: Storage = Depends(get_storage)):
    return await storage.list_users()


@router.post("/users", response_model=UserOut, status_code=201)
async def create_user(payload: UserIn, storage: Storage = Depends(get_storage)):
    return await storage.create_user(payload.name, payload.email)


# === Board endpoints ===


@router.get("/boards", response_model=list[BoardSummary])
async def list_boards(storage: Storage = Depends(get_storage)):
    return await storage.list_boards()


@router.post("/boards", response_model=BoardOut, status_code=201)
async def create_board(payload: BoardIn, storage: Storage = Depends(get_storage)):
    return await storage.create_board(payload.name, str(payload.adminUserId))


# === List endpoints ===


@router.post("/boards/lists", response_model=ListOut, status_code=201)
async def create_list(payload: ListIn, storage: Storage = Depends(get_storage)):
    return await storage.create_list(payload.name, str(payload.boardId))


@router.get("/boards/lists/{board_id}", response_model=list[ListSummary])
async def lists_for_board(board_id: UUID, storage: Storage = Depends(get_storage)):
    return await storage.lists_for_board(str(board_id))


# === Card endpoints ===


@router.post("/boards/lists/cards", response_model=CardOut, status_code=201)
async def create_card(payload: CardIn, storage: Storage = Depends(get_storage)):
    return await storage.create_card(
        payload.title,
        payload.description,
        payload.due_date,
        str(payload.list_id),
        str(payload.ownerUserId),
    )


@router.post("/boards/lists/cards/members", response_model=MemberOut, status_code=201)
async def add_member(payload: MemberIn, storage: Storage = Depends(get_storage)):
    return await storage.add_member(str(payload.cardId), str(payload.memberUserId))


@router.get("/boards/lists/cards/{list_id}", response_model=list[CardSummary])
async def cards_for_list(list_id: UUID, storage: Storage = Depends(get_storage)):
    return await storage.cards_for_list(str(list_id))


# === Application ===


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = Database(settings.database_url, pool_size=settings.pool_size)
        await db.connect()
        app.state.db = db
        try:
            yield
        finally:
            await db.disconnect()

    app = FastAPI(title="Taskboard API", version="1.0.0", lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, on_validation_error)
    app.add_exception_handler(IntegrityError, on_integrity_error)
    app.add_exception_handler(SQLAlchemyError, on_database_error)
    app.include_router(router)
    return app


app = create_app()
