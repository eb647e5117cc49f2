from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    if exc.base_error.reason:
        error_dict["reason"] = exc.base_error.reason
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig, session_factory: Optional[sessionmaker] = None) -> FastAPI:
    from src.depends import AsyncSessionLocal, build_export_worker
    from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from src.app.use_cases.exports import ResumePendingExportsUseCase

    session_factory = session_factory or AsyncSessionLocal

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        worker = build_export_worker(ApplicationConfig, session_factory)
        app.state.export_worker = worker
        await worker.start()

        # Jobs left pending by a previous process are queued again
        async with session_factory() as session:
            use_case = ResumePendingExportsUseCase(SqlAlchemyUnitOfWork(session), worker)
            result = await use_case.execute(limit=ApplicationConfig.EXPORT_RESUME_LIMIT)
        logger.info(f"[APP] Export worker ready, {result.value} pending jobs resumed")

        yield

        await worker.stop()

    app = FastAPI(title="Caption Export API", version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import health_check, exports

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(exports.router, prefix=ApplicationConfig.API_PREFIX, tags=["Exports"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
