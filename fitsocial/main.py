from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException
import logging

from fitsocial.core.config import settings
from fitsocial.core.errors import AppError, ErrorCode, ERROR_MESSAGES, code_for_status
from fitsocial.core.responses import error_response
from fitsocial.middleware.request_logging import RequestLoggingMiddleware
from fitsocial.middleware.auth_logging import AuthLoggingMiddleware
from fitsocial.modules.feed.api.router import router as feed_router
from fitsocial.modules.posts.api.router import router as posts_router
from fitsocial.modules.posts.likes.api.router import router as likes_router
from fitsocial.modules.posts.comments.api.router import router as comments_router
from fitsocial.modules.posts.reposts.api.router import router as reposts_router, user_router as user_reposts_router
from fitsocial.modules.follows.api.router import router as follows_router
from fitsocial.modules.profiles.api.router import router as profiles_router
from fitsocial.modules.workouts.api.router import router as workouts_router
from fitsocial.db.init_db import create_all_tables

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("fitsocial")

# Initialize the FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    debug=settings.DEBUG,
    description="Social feed for a fitness community",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    swagger_ui_parameters={"defaultModelsExpandDepth": -1},
)

@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
    if settings.AUTO_CREATE_TABLES:
        create_all_tables()

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{exc.code.value} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(error_response(exc.code.value, exc.message, exc.details)),
    )

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(error_response(
            ErrorCode.VALIDATION_ERROR.value,
            ERROR_MESSAGES[ErrorCode.VALIDATION_ERROR],
            exc.errors(),
        )),
    )

@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    code = code_for_status(exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else ERROR_MESSAGES[code]
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(code.value, message),
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Unhandled database error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=error_response(ErrorCode.DATABASE_ERROR.value, ERROR_MESSAGES[ErrorCode.DATABASE_ERROR]),
    )

# Add middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(AuthLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(feed_router, prefix=f"{settings.API_V1_STR}/social/posts", tags=["feed"])
app.include_router(posts_router, prefix=f"{settings.API_V1_STR}/social/posts", tags=["posts"])
app.include_router(likes_router, prefix=f"{settings.API_V1_STR}/social/posts", tags=["likes"])
app.include_router(reposts_router, prefix=f"{settings.API_V1_STR}/social/posts", tags=["reposts"])
app.include_router(comments_router, prefix=f"{settings.API_V1_STR}/social/posts/{{post_id}}/comments", tags=["comments"])
app.include_router(follows_router, prefix=f"{settings.API_V1_STR}/social/users", tags=["follows"])
app.include_router(user_reposts_router, prefix=f"{settings.API_V1_STR}/social/users", tags=["reposts"])
app.include_router(profiles_router, prefix=f"{settings.API_V1_STR}/users", tags=["users"])
app.include_router(workouts_router, prefix=f"{settings.API_V1_STR}/workouts", tags=["workouts"])

@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "documentation": "/docs" if settings.DEBUG else None,
    }

@app.get("/health")
async def health_check():
    return {"status": "ok", "version": settings.VERSION}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("fitsocial.main:app", host="0.0.0.0", port=8000, reload=True)
