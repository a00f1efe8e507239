import logging
from pathlib import Path

from sqlalchemy import inspect
from sqlalchemy.engine import Engine, make_url
from sqlmodel import SQLModel, create_engine, Session
from ..core.config import settings

log = logging.getLogger(__name__)


def make_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    db_url = make_url(url)
    if db_url.get_backend_name() == "sqlite":
        # handlers run on a thread pool, the connection may cross threads
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        if db_url.database and db_url.database != ":memory:":
            Path(db_url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=echo, **kwargs)


engine = make_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

def init_db(bind: Engine | None = None) -> None:
    from .models import Task, seed_tasks

    bind = bind or engine
    first_run = not inspect(bind).has_table(Task.__tablename__)
    SQLModel.metadata.create_all(bind)
    if not first_run:
        return

    log.info("Created table %s, inserting seed data", Task.__tablename__)
    with Session(bind) as session:
        session.add_all(seed_tasks())
        session.commit()

def get_session():
    with Session(engine) as session:
        yield session
