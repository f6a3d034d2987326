import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from core.config_loader import settings
from core.database import Database
from core.errors import register_exception_handlers
from core.logging_setup import setup_logging
from core.seed import seed_sample_data
from employee.router import employee_router
from task.router import task_router
import models_bootstrap

logger = logging.getLogger(__name__)

openapi_tags = [
    {
        "name": "Employees",
        "description": "Employee records",
    },
    {
        "name": "Tasks",
        "description": "Tasks and their assignment to employees",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)

    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO).open()
    if settings.AUTO_CREATE_SCHEMA:
        database.create_schema()
    if settings.SEED_SAMPLE_DATA:
        with database.session() as db:
            seed_sample_data(db)
    app.state.database = database
    logger.info("%s started", settings.PROJECT_NAME)
    try:
        yield
    finally:
        database.close()


def create_app() -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME, openapi_tags=openapi_tags, lifespan=lifespan)

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
            ],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(employee_router)
    app.include_router(task_router)

    @app.get("/", tags=["Health Checks"])
    def read_root():
        return {
            "message": "Employee & Task API is running",
            "endpoints": {
                "employees": "/employees",
                "tasks": "/tasks",
                "health": "/health",
            },
        }

    @app.get("/health", tags=["Health Checks"])
    def health():
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.PROJECT_NAME,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
