# teambuilder/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from teambuilder.core.config import settings
from teambuilder.core.log import configure_logging
from teambuilder.api import routes_auth, routes_team
from teambuilder.deps import create_store
from teambuilder.middleware.request_log import RequestLogMiddleware

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_at_startup()
    # Tests install their own store before the app starts
    if not hasattr(app.state, "store"):
        app.state.store = create_store(settings)
    logger.info("%s started (env=%s, store=%s)", settings.APP_NAME, settings.APP_ENV, settings.STORE_BACKEND)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.add_middleware(RequestLogMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)


# Every error leaves the API as {"error": message}
@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "Invalid request")
    detail = f"{where}: {msg}" if where else msg
    return JSONResponse({"error": f"Invalid request body ({detail})"}, status_code=400)


# Routers
app.include_router(routes_auth.router)
app.include_router(routes_team.router)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Fantasy Football API is running"


@app.get("/health")
def health():
    return {"ok": True, "env": settings.APP_ENV}
