"""SQLAlchemy implementation of the KeyValueStore port."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from cafe_finder.adapters.persistence.models import KeyValueModel
from cafe_finder.application.ports.key_value_store import KeyValueStore


class SqlKeyValueStore(KeyValueStore):
    """One row per key; every ``set`` commits before returning."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            row = session.get(KeyValueModel, key)
            return row.value if row else None

    def set(self, key: str, value: str) -> None:
        with self._session_factory() as session:
            row = session.get(KeyValueModel, key)
            if row is None:
                session.add(KeyValueModel(key=key, value=value))
            else:
                row.value = value
            session.commit()
