"""
Database connection and session management.

Uses synchronous SQLAlchemy (via SQLModel) with a bounded QueuePool owned by a
process-scoped Database object. The object is opened in the FastAPI lifespan
and disposed at shutdown; request handlers get sessions through a dependency.
"""

from typing import Generator, List
from contextlib import contextmanager
import logging
import time

from sqlalchemy import event, inspect, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, create_engine
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from private_markets.core.config import Settings

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("fund", "investor", "investment")

_CHECKOUT_KEY = "checked_out_at"


def normalize_database_url(url: str) -> str:
    """Rewrite plain postgresql:// URLs to the psycopg (v3) driver."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


class Database:
    """Connection pool plus session factory for one process.

    Example:
        database = Database.from_settings(settings)
        database.open()
        with database.session() as session:
            funds = FundOperations.get_all(session)
        database.close()
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 10,
        pool_timeout: float = 2.0,
        checkout_warn_seconds: float = 5.0,
        connect_retries: int = 3,
        allow_destructive: bool = False,
        echo: bool = False,
    ):
        """Configure the engine. No connection is made until open().

        Args:
            url: SQLAlchemy database URL
            pool_size: Persistent connections kept in the pool
            max_overflow: Extra connections allowed under load
            pool_timeout: Seconds to wait for a free connection
            checkout_warn_seconds: Hold time after which a warning is logged
            connect_retries: Connectivity attempts made by open()
            allow_destructive: Enables clear/truncate maintenance operations
            echo: Log SQL statements
        """
        self.url = normalize_database_url(url)
        self.checkout_warn_seconds = checkout_warn_seconds
        self.connect_retries = max(1, connect_retries)
        self.allow_destructive = allow_destructive

        db_url = make_url(self.url)
        self.is_sqlite = db_url.get_backend_name() == "sqlite"

        logger.info("===== DATABASE CONNECTION INFO =====")
        logger.info(f"Database driver: {db_url.drivername}")
        logger.info(f"Database host: {db_url.host}")
        logger.info(f"Database port: {db_url.port}")
        logger.info(f"Database name: {db_url.database}")

        engine_kwargs = {
            "pool_pre_ping": True,  # Verify connections before use
            "echo": echo,
        }
        if not (self.is_sqlite and db_url.database in (None, "", ":memory:")):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
            )
        if not self.is_sqlite:
            engine_kwargs["connect_args"] = {"connect_timeout": max(1, int(pool_timeout))}

        self.engine: Engine = create_engine(self.url, **engine_kwargs)
        self._install_listeners()

        logger.info("Database engine configured with:")
        logger.info(f"  - Pool size: {pool_size} (+{max_overflow} overflow)")
        logger.info(f"  - Checkout timeout: {pool_timeout}s")
        logger.info(f"  - Checkout warning after: {checkout_warn_seconds}s")
        logger.info(f"  - Destructive operations: {'enabled' if allow_destructive else 'disabled'}")

        # Explicit control over flush/commit; no automatic refresh after commit
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            class_=Session,
            expire_on_commit=False,
            autoflush=False,
        )
        self._opened = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT_SECONDS,
            checkout_warn_seconds=settings.DB_CHECKOUT_WARN_SECONDS,
            connect_retries=settings.DB_CONNECT_RETRIES,
            allow_destructive=settings.ALLOW_DESTRUCTIVE_OPERATIONS,
            echo=settings.DEBUG,
        )

    def _install_listeners(self) -> None:
        warn_after = self.checkout_warn_seconds

        if self.is_sqlite:
            @event.listens_for(self.engine, "connect")
            def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        @event.listens_for(self.engine, "checkout")
        def _record_checkout(dbapi_connection, connection_record, connection_proxy):
            connection_record.info[_CHECKOUT_KEY] = time.monotonic()

        @event.listens_for(self.engine, "checkin")
        def _warn_long_checkout(dbapi_connection, connection_record):
            started = connection_record.info.pop(_CHECKOUT_KEY, None)
            if started is None:
                return
            held = time.monotonic() - started
            if held > warn_after:
                logger.warning(
                    f"A connection was checked out for {held:.1f}s "
                    f"(warning threshold {warn_after:.1f}s)"
                )

    def open(self) -> None:
        """Test connectivity (with retries) and verify the schema exists.

        Raises:
            OperationalError: If the database stays unreachable after retries
            RuntimeError: If required tables are missing
        """
        logger.info("===== TESTING DATABASE CONNECTION =====")
        self._ping()
        logger.info("✅ Initial database connection test successful!")
        self.verify_schema()
        self._opened = True
        logger.info("===== DATABASE SETUP COMPLETE =====")

    def _ping(self) -> None:
        @retry(
            stop=stop_after_attempt(self.connect_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            retry=retry_if_exception_type(OperationalError),
            reraise=True,
        )
        def ping() -> None:
            try:
                with self.engine.connect() as connection:
                    connection.execute(text("SELECT 1"))
            except OperationalError as e:
                logger.warning(f"Database connection attempt failed: {e}")
                raise

        ping()

    def missing_tables(self) -> List[str]:
        existing = set(inspect(self.engine).get_table_names())
        return [table for table in REQUIRED_TABLES if table not in existing]

    def verify_schema(self) -> None:
        """
        Verify that the application tables exist.

        Does NOT create tables - run scripts/migrate.py for that.

        Raises:
            RuntimeError: If any required table is missing
        """
        logger.info("Verifying database schema...")
        missing = self.missing_tables()
        if missing:
            logger.error(f"❌ Missing tables: {', '.join(missing)}")
            logger.error("   Run 'python scripts/migrate.py' to initialize the database schema.")
            raise RuntimeError(
                "Database schema not initialized. "
                "Please run 'python scripts/migrate.py' before starting the application."
            )
        logger.info("✅ Database schema verified")

    def close(self) -> None:
        """Dispose of the pool, closing every pooled connection."""
        self.engine.dispose()
        self._opened = False
        logger.info("Database connection pool closed")

    @property
    def is_open(self) -> bool:
        return self._opened

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Does NOT auto-commit - operations commit explicitly. Rolls back on any
        exception and always closes, returning the connection to the pool.

        Usage:
            with database.session() as session:
                fund = FundOperations.create(session, fund_in)

        Yields:
            Session: Database session
        """
        session = self.SessionLocal()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

