import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from catalog.core import config
from catalog.database import StorageContext, create_db_engine
from catalog.repository import CatalogRepository
from catalog.routes import course_routes, user_routes
from catalog.routes.error_handlers import register_error_handlers
from catalog.seed_data import SEED_COURSES, SEED_USERS

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    # SQL statements are logged through the root handler only; engines never set echo.
    logging.getLogger('sqlalchemy.engine').setLevel(level)


def build_repository() -> CatalogRepository:
    engine = create_db_engine(config.DATABASE_URL)
    return CatalogRepository(StorageContext(engine), enable_logging=config.DB_ENABLE_LOGGING)


def create_app(
    repository: CatalogRepository | None = None,
    seed_users: list[dict] = SEED_USERS,
    seed_courses: list[dict] = SEED_COURSES,
) -> FastAPI:
    if repository is None:
        repository = build_repository()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            await run_in_threadpool(repository.bootstrap, seed_users, seed_courses)
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL.')
            raise
        yield

    app = FastAPI(title='Course Catalog API', lifespan=lifespan)
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_error_handlers(app)

    @app.get('/')
    def root():
        return {'message': 'Welcome to the REST API project!'}

    app.include_router(user_routes.router)
    app.include_router(course_routes.router)
    return app


def create_default_app() -> FastAPI:
    config.validate_runtime_config()
    configure_logging(config.DB_ENABLE_LOGGING)
    return create_app()


app = create_default_app()
