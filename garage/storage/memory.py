# garage/storage/memory.py
from typing import Any, Dict, List

from garage.exceptions import CarNotFoundError
from garage.schemas import Car
from garage.storage.base import CarStore, new_car_id


class MemoryCarStore(CarStore):
    """Process-local ordered list; everything is lost on restart."""

    backend = "memory"

    def __init__(self) -> None:
        self._cars: List[Car] = []

    def _index(self, car_id: str) -> int:
        for i, car in enumerate(self._cars):
            if car.car_id == car_id:
                return i
        raise CarNotFoundError(car_id)

    def list(self) -> List[Car]:
        return list(self._cars)

    def get(self, car_id: str) -> Car:
        return self._cars[self._index(car_id)]

    def insert(self, fields: Dict[str, Any]) -> Car:
        car = Car(car_id=new_car_id(), **fields)
        self._cars.append(car)
        return car

    def replace(self, car_id: str, fields: Dict[str, Any]) -> Car:
        i = self._index(car_id)
        self._cars[i] = self._cars[i].model_copy(update=fields)
        return self._cars[i]

    def remove(self, car_id: str) -> None:
        # Deleting an absent id is not an error for this backend
        self._cars = [c for c in self._cars if c.car_id != car_id]

    def count(self) -> int:
        return len(self._cars)
