"""SQLite backed key/value store that keeps form snapshots across reloads."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

from sqlalchemy import Column, DateTime, String, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from config import STORE_URL

_SQLITE_PREFIX = "sqlite://"
Base = declarative_base()


class StoredItem(Base):
    __tablename__ = "local_store"

    key = Column(String(255), primary_key=True)
    value_json = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class LocalStore:
    """Durable string values addressed by key, like a browser's local storage."""

    def __init__(self, url: str = STORE_URL) -> None:
        connect_args = {"check_same_thread": False} if url.startswith(_SQLITE_PREFIX) else {}
        self.engine: Engine = create_engine(url, echo=False, future=True, connect_args=connect_args)
        self._session_factory = sessionmaker(bind=self.engine, autocommit=False, autoflush=False, future=True)
        self._initialised = False

    def init_db(self) -> None:
        """Create the table if it doesn't exist."""

        if not self._initialised:
            Base.metadata.create_all(bind=self.engine)
            self._initialised = True

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations."""

        self.init_db()
        session: Session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_item(self, key: str) -> Optional[str]:
        with self.get_session() as session:
            stmt = select(StoredItem.value_json).where(StoredItem.key == key)
            return session.execute(stmt).scalar_one_or_none()

    def set_item(self, key: str, value: str) -> None:
        with self.get_session() as session:
            item = session.get(StoredItem, key)
            if item is None:
                session.add(StoredItem(key=key, value_json=value))
            else:
                item.value_json = value

    def remove_item(self, key: str) -> None:
        with self.get_session() as session:
            item = session.get(StoredItem, key)
            if item is not None:
                session.delete(item)


__all__ = ["Base", "LocalStore", "StoredItem"]
