# garage/exceptions.py
from typing import Optional


class CarNotFoundError(Exception):
    """Raised when no car matches the requested id."""
    def __init__(self, car_id: str, message: Optional[str] = None):
        self.car_id = car_id
        self.message = message or f"Car '{car_id}' not found"
        super().__init__(self.message)


class StorageError(Exception):
    """Unexpected failure inside the storage layer (wraps the driver/ORM error)."""
