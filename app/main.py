from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from app.api.v1.router import api_router
from app.core.config import settings
from app.core.database import create_all_tables, dispose_engine
from app.core.logging import console_logger
from app.core.middleware import RequestLoggingMiddleware, ErrorHandlingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup: local databases can be bootstrapped without running migrations
    if settings.AUTO_CREATE_TABLES:
        await create_all_tables()
        console_logger.info("database.tables_created")

    console_logger.info("app.startup", environment=settings.ENVIRONMENT)

    yield

    # Shutdown: close pooled connections
    await dispose_engine()

app = FastAPI(
    title="Jobwise Backend",
    description="Job application tracking: accounts, applications and analytics",
    version="0.1.0",
    lifespan=lifespan,
)

# RequestLogging is outermost so it logs the final status code
app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
