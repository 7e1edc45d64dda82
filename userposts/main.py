import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from userposts.api.exception_handlers import register_exception_handlers
from userposts.api.routers import posts_jpa, users, users_jpa
from userposts.core.config import Settings
from userposts.core.database import Base, make_engine, make_session_factory
from userposts.core.log import configure_logging
from userposts.core.seed import seed_database
from userposts.storage.memory import empty_post_repository, seeded_user_repository

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    engine = make_engine(settings.database_url, echo=settings.sql_echo)
    session_factory = make_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # DB setup
        Base.metadata.create_all(bind=engine)
        if settings.seed_data:
            db = session_factory()
            try:
                seed_database(db)
            finally:
                db.close()
        logger.info("database ready at %s", engine.url.render_as_string(hide_password=True))
        yield
        engine.dispose()

    app = FastAPI(title="userposts", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.user_store = seeded_user_repository()
    app.state.post_store = empty_post_repository()

    app.include_router(users.router)
    app.include_router(users_jpa.router)
    app.include_router(posts_jpa.router)
    register_exception_handlers(app)
    return app


app = create_app()
