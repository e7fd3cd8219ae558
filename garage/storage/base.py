# garage/storage/base.py
from __future__ import annotations
import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from garage.schemas import Car, CarCreate
from garage.settings import EXAMPLE_CAR

logger = logging.getLogger(__name__)


def new_car_id() -> str:
    return uuid.uuid4().hex


class CarStore(ABC):
    """
    Storage accessor for the car collection.

    `fields` arguments are already validated (see garage.schemas); stores only
    persist them. Lookups of a missing id raise CarNotFoundError.
    """

    backend: str = ""

    @abstractmethod
    def list(self) -> List[Car]:
        ...

    @abstractmethod
    def get(self, car_id: str) -> Car:
        ...

    @abstractmethod
    def insert(self, fields: Dict[str, Any]) -> Car:
        ...

    @abstractmethod
    def replace(self, car_id: str, fields: Dict[str, Any]) -> Car:
        """Merges `fields` into the stored car and returns the result."""

    @abstractmethod
    def remove(self, car_id: str) -> None:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    def close(self) -> None:
        pass


def seed_example(store: CarStore) -> bool:
    """Inserts EXAMPLE_CAR if the store is empty. Returns True when it seeded."""
    if store.count() > 0:
        return False
    car = store.insert(CarCreate(**EXAMPLE_CAR).model_dump())
    logger.info("Seeded example car %s (%s %s)", car.car_id, car.make, car.model)
    return True
