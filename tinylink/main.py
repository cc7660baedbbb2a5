# tinylink/main.py
from fastapi import FastAPI, Depends, Request, Response, status
from fastapi.responses import RedirectResponse, JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from .database import SessionLocal, engine, Base, get_db
from .config import LOG_LEVEL
from .errors import LinkError
from .identity import Identity, resolve_identity, remember_identity
from .redirect import resolve_redirect
from .service import LinkService
from .store import LinkStore
from . import models, schemas

# Create tables
Base.metadata.create_all(bind=engine)

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("tinylink")

app = FastAPI(title="TinyLink")


def get_store(db: Session = Depends(get_db)) -> LinkStore:
    return LinkStore(db)


def get_service(store: LinkStore = Depends(get_store)) -> LinkService:
    return LinkService(store)


# ---------- Owner-scoped API ----------

@app.post("/api/links", response_model=schemas.LinkInfo, status_code=status.HTTP_201_CREATED)
def create_link(
    payload: schemas.LinkCreate,
    response: Response,
    identity: Identity = Depends(resolve_identity),
    service: LinkService = Depends(get_service),
):
    link = service.create(identity.owner_id, payload.url, payload.code)
    remember_identity(response, identity)
    return link


@app.get("/api/links", response_model=List[schemas.LinkInfo])
def list_links(
    response: Response,
    identity: Identity = Depends(resolve_identity),
    service: LinkService = Depends(get_service),
):
    links = service.list(identity.owner_id)
    remember_identity(response, identity)
    return links


@app.get("/api/links/{code}", response_model=schemas.LinkInfo)
def get_link(
    code: str,
    identity: Identity = Depends(resolve_identity),
    service: LinkService = Depends(get_service),
):
    return service.get(identity.owner_id, code)


@app.delete("/api/links/{code}", response_model=schemas.Message)
def delete_link(
    code: str,
    identity: Identity = Depends(resolve_identity),
    service: LinkService = Depends(get_service),
):
    service.delete(identity.owner_id, code)
    return {"message": "Link deleted successfully"}


# ---------- Public redirects ----------

@app.get("/api/{code}", include_in_schema=False)
def api_redirect(code: str, store: LinkStore = Depends(get_store)):
    return RedirectResponse(url=resolve_redirect(store, code), status_code=status.HTTP_302_FOUND)


# MUST BE LAST: catch-all redirect route
@app.get("/{code}")
def redirect_to_original(code: str, store: LinkStore = Depends(get_store)):
    return RedirectResponse(url=resolve_redirect(store, code), status_code=status.HTTP_302_FOUND)


# ---------- Centralized Error Handling (logs + DB) ----------

def log_error_to_db(request: Request, status_code: int, detail: str):
    """Helper: store error details in DB."""
    db = SessionLocal()
    try:
        error = models.ErrorLog(
            path=str(request.url),
            method=request.method,
            status_code=status_code,
            detail=detail,
        )
        db.add(error)
        db.commit()
    except Exception as e:
        logger.error(f"Failed to log error to DB: {e}")
    finally:
        db.close()


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {status_code}: {message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {status_code}: {message}")
    log_error_to_db(request, status_code, message)
    return JSONResponse(status_code=status_code, content={"error": message})


# Plain def handlers run in the threadpool, so the error_logs write does not block the loop
@app.exception_handler(LinkError)
def link_error_handler(request: Request, exc: LinkError):
    return error_response(request, exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(request, exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error at {request.url}: {exc.errors()}")
    log_error_to_db(request, 422, "Validation error")
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
def internal_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error at {request.url}: {exc}", exc_info=True)
    log_error_to_db(request, 500, "Internal server error")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )
