import logging
from contextlib import asynccontextmanager
from functools import wraps
from typing import Annotated, Any, Callable, NamedTuple, Optional

from fastapi import APIRouter, FastAPI, Path, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

from .app import create_entry, delete_entry, list_entries, update_entry
from .config import Config
from .constants import MAX_ENTRY_ID
from .db import DB
from .enums import HttpMethod
from .exceptions import NotFound, StorageFailure, ValidationError
from .repository import TimesheetEntryRepository
from .schemas import EntryPayload, EntryResponse, ErrorResponse, FieldErrorResponse
from .version import get_version


EntryIdPath = Annotated[int, Path(ge=1, le=MAX_ENTRY_ID)]


class Route(NamedTuple):
    method: HttpMethod
    path: str
    endpoint: Callable
    status_code: int
    response_model: Any = None


def request_session(func: Callable) -> Callable:
    """release the thread's scoped session once the endpoint is done with it"""

    @wraps(func)
    def inner(*args, request: Request, **kwargs):
        db: DB = request.app.state.db
        try:
            return func(*args, request=request, **kwargs)
        finally:
            db.session.remove()

    return inner


def repository_for(request: Request) -> TimesheetEntryRepository:
    return TimesheetEntryRepository(request.app.state.db)


###############
# endpoints
###############


@request_session
def list_timesheets(request: Request) -> list[EntryResponse]:
    return [EntryResponse.from_entry(e) for e in list_entries(repository_for(request))]


@request_session
def create_timesheet(payload: EntryPayload, request: Request, response: Response) -> EntryResponse:
    entry = create_entry(repository_for(request), payload.to_entry())
    response.headers["Location"] = f"{request.app.state.config.api_prefix}/{entry.id}"
    return EntryResponse.from_entry(entry)


@request_session
def update_timesheet(
    entry_id: EntryIdPath, payload: EntryPayload, request: Request
) -> EntryResponse:
    entry = update_entry(repository_for(request), entry_id, payload.to_entry())
    return EntryResponse.from_entry(entry)


@request_session
def delete_timesheet(entry_id: EntryIdPath, request: Request) -> Response:
    delete_entry(repository_for(request), entry_id)
    return Response(status_code=204)


ROUTES: tuple[Route, ...] = (
    Route(HttpMethod.GET, "", list_timesheets, 200, list[EntryResponse]),
    Route(HttpMethod.POST, "", create_timesheet, 201, EntryResponse),
    Route(HttpMethod.PUT, "/{entry_id}", update_timesheet, 200, EntryResponse),
    Route(HttpMethod.DELETE, "/{entry_id}", delete_timesheet, 204),
)


def build_router(prefix: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["timesheets"])
    for route in ROUTES:
        responses: dict = {}
        if route.method in (HttpMethod.POST, HttpMethod.PUT):
            responses[400] = {"model": ErrorResponse}
        if "{entry_id}" in route.path:
            responses[404] = {"model": ErrorResponse}
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method.value],
            status_code=route.status_code,
            response_model=route.response_model,
            responses=responses,
        )
    return router


###############
# error handling
###############


def error_response(status_code: int, detail: str, errors: Optional[list] = None) -> JSONResponse:
    body = ErrorResponse(detail=detail, errors=errors or [])
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logging.info(f"{request.method} {request.url.path}: {exc}")
    errors = [
        FieldErrorResponse(field=to_camel(e.field.value), message=e.message) for e in exc.errors
    ]
    return error_response(400, "Validation failed", errors)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logging.info(f"{request.method} {request.url.path}: malformed request {exc.errors()}")
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        field = ".".join(loc[1:]) or ".".join(loc)
        errors.append(FieldErrorResponse(field=field, message=err.get("msg", "invalid")))
    return error_response(400, "Malformed request", errors)


async def handle_not_found(request: Request, exc: NotFound) -> JSONResponse:
    logging.info(f"{request.method} {request.url.path}: {exc}")
    return error_response(404, str(exc))


async def handle_storage_failure(request: Request, exc: StorageFailure) -> JSONResponse:
    logging.error(f"{request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(500, "Storage failure")


###############
# app factory
###############


def create_app(app_config: Optional[Config] = None, db: Optional[DB] = None) -> FastAPI:
    """
    Build the FastAPI application.

    A DB is created from app_config when none is passed in, and the schema is created if
    missing. The engine is disposed on shutdown only if it was created here.
    """
    if app_config is None:
        app_config = Config()
    owns_db = db is None
    if db is None:
        db = DB()
    db.connect(app_config.database_url, app_config.echo_sql)
    db._ensure_db()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_db:
            db.disconnect()

    app = FastAPI(
        title="Timesheet API",
        version=get_version(),
        debug=app_config.debug,
        lifespan=lifespan,
    )
    app.state.config = app_config
    app.state.db = db

    if app_config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(app_config.cors_origins),
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["Location"],
        )

    app.include_router(build_router(app_config.api_prefix))
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(NotFound, handle_not_found)
    app.add_exception_handler(StorageFailure, handle_storage_failure)
    return app
