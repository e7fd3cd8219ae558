# garage/storage/sql.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from garage.exceptions import CarNotFoundError, StorageError
from garage.schemas import Car
from garage.storage.base import CarStore, new_car_id
from garage.storage.models import Base, CarRow

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> Dict[str, Any]:
    if not url.startswith("sqlite"):
        return {}
    # The ASGI test client and the threadpool may touch the connection from other threads
    kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


class SqlCarStore(CarStore):
    """
    Single `cars` table through the SQLAlchemy ORM.
    One short-lived session per operation; every write is committed on its own.
    """

    backend = "sqlite"

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine = create_engine(url, echo=echo, **_engine_kwargs(url))
        self._sessions = sessionmaker(bind=self.engine, expire_on_commit=False)
        self.init_schema()

    def init_schema(self) -> None:
        """Creates the table if it is missing. Never drops or alters anything."""
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not initialize schema: {e}") from e

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._sessions()
        try:
            yield session
            session.commit()
        except (SQLAlchemyError, OverflowError, ValueError) as e:
            # driver errors like OverflowError are not wrapped by SQLAlchemy
            session.rollback()
            raise StorageError(f"{type(e).__name__}: {getattr(e, 'orig', None) or e}") from e
        finally:
            session.close()

    @staticmethod
    def _load(session: Session, car_id: str) -> CarRow:
        row = session.get(CarRow, car_id)
        if row is None:
            raise CarNotFoundError(car_id)
        return row

    def list(self) -> List[Car]:
        with self._session() as session:
            rows = session.scalars(select(CarRow).order_by(CarRow.created_at)).all()
            return [Car.model_validate(r) for r in rows]

    def get(self, car_id: str) -> Car:
        with self._session() as session:
            return Car.model_validate(self._load(session, car_id))

    def insert(self, fields: Dict[str, Any]) -> Car:
        with self._session() as session:
            row = CarRow(car_id=new_car_id(), **fields)
            session.add(row)
            session.flush()
            return Car.model_validate(row)

    def replace(self, car_id: str, fields: Dict[str, Any]) -> Car:
        with self._session() as session:
            row = self._load(session, car_id)
            for name, value in fields.items():
                setattr(row, name, value)
            session.flush()
            return Car.model_validate(row)

    def remove(self, car_id: str) -> None:
        with self._session() as session:
            session.delete(self._load(session, car_id))

    def count(self) -> int:
        with self._session() as session:
            return session.scalar(select(func.count()).select_from(CarRow)) or 0

    def close(self) -> None:
        self.engine.dispose()
