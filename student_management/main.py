from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.responses import JSONResponse

from student_management.api.main import api_router
from student_management.core.errors import ServiceError
from student_management.core.logging import configure_logging, get_logger
from student_management.core.security import SecurityHeadersMiddleware
from student_management.core.settings import settings
from student_management.db import SessionLocal
from student_management.db.init_db import init_db
from student_management.middlewares.telemetry import RequestContextMiddleware
from student_management.version import APP_VERSION, BUILD_TIME_UTC, GIT_SHA

configure_logging(json=settings.LOG_JSON, level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.INIT_DB_ON_STARTUP:
        db = SessionLocal()
        try:
            init_db(db)
        finally:
            db.close()
    yield


app = FastAPI(title="Student Management API", version=APP_VERSION, debug=settings.DEBUG, lifespan=lifespan)

# --- Middlewares de contexto/log
app.add_middleware(RequestContextMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

# --- CORS para o SPA (token vai no header, não em cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "X-Request-ID"],
)

# --- Segurança: HTTPS only em prod
if settings.APP_ENV.value == "prod":
    app.add_middleware(HTTPSRedirectMiddleware)


@app.exception_handler(ServiceError)
async def service_error_handler(_: Request, exc: ServiceError):
    return JSONResponse(
        {"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError):
    # corpo/parâmetro inválido é 400, não o 422 padrão do FastAPI
    return JSONResponse({"detail": jsonable_encoder(exc.errors())}, status_code=400)


app.include_router(api_router)


# --- Endpoints
@app.get("/healthz", tags=["ops"])
def healthz():
    get_logger().info("health.check")
    return {"status": "ok", "env": settings.APP_ENV, "version": APP_VERSION}


@app.get("/version", tags=["ops"])
def version():
    return {
        "version": APP_VERSION,
        "git_sha": GIT_SHA,
        "build_time_utc": BUILD_TIME_UTC,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
    }
