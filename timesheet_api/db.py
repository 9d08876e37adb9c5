import logging
from typing import Optional

from sqlalchemy import MetaData, create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import scoped_session, sessionmaker

from .exceptions import StorageFailure
from .models import Base


class DB:
    engine: Engine
    session: scoped_session
    db_url: str
    metadata: MetaData = Base.metadata
    _sessionmaker: sessionmaker

    def __init__(self, db_url: Optional[str] = None, echo_sql: bool = False) -> None:
        if db_url:
            self.db_url = db_url
            self._init_session(echo_sql)

    def _init_session(self, echo_sql: bool) -> None:
        connect_args = {}
        if make_url(self.db_url).get_backend_name() == "sqlite":
            # sessions are handed to the api worker threads
            connect_args["check_same_thread"] = False
        self.engine = create_engine(self.db_url, echo=echo_sql, connect_args=connect_args)
        self._sessionmaker = sessionmaker(autoflush=False, bind=self.engine)
        self.session = scoped_session(self._sessionmaker)

    def _validate_conn(self) -> None:
        conn_attrs = ["session", "engine", "db_url"]
        if any([hasattr(self, "session"), hasattr(self, "engine")]):
            assert all(
                [getattr(self, aname, None) for aname in conn_attrs]
            ), f"Malformed DB object: {', '.join([f'self.{x}={getattr(self, x, None)}' for x in conn_attrs])}"
            assert (
                self.engine_url == make_url(self.db_url)
            ), f"Active database {self.engine_url} does not match db_url {self.db_url}"

    @property
    def engine_url(self):
        if getattr(self, "engine", None):
            return self.engine.url
        return None

    @property
    def is_connected(self) -> bool:
        return getattr(self, "engine", None) is not None

    def connect(self, db_url: Optional[str] = None, echo_sql: bool = False) -> None:
        # no db_url, no connection
        if not any([db_url, hasattr(self, "db_url")]):
            raise ValueError("You must specify db_url on creation or when connecting")

        # ensure any existing connection isn't wonky
        self._validate_conn()

        # don't clobber existing connections / settings
        if self.is_connected:
            if db_url and make_url(db_url) != make_url(self.db_url):
                raise ValueError("Cannot overwrite existing db_url, create a new DB object")
            return
        elif db_url:
            self.db_url = db_url

        assert self.db_url, f"self.db_url still unset: received db_url={db_url}"
        logging.debug(f"connecting to {make_url(self.db_url).render_as_string(hide_password=True)}")
        self._init_session(echo_sql)

    def create_db(self) -> None:
        self.metadata.create_all(self.engine)

    def disconnect(self) -> None:
        if hasattr(self, "session"):
            self.session.remove()
            del self.session
        if getattr(self, "engine", None) is not None:
            self.engine.dispose()
            del self.engine

    def try_commit(self, rollback: bool = True) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            if rollback:
                self.session.rollback()
            raise StorageFailure("commit", e) from e

    def _ensure_db(self) -> None:
        assert (
            getattr(self, "session", None) is not None and getattr(self, "engine", None) is not None
        )
        inspector = inspect(self.engine)
        if not all([inspector.has_table(t.name) for t in self.metadata.sorted_tables]):
            logging.info(f"creating missing tables in {self.engine_url}")
            self.create_db()
