# garage/storage/models.py
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, Date, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from garage.settings import MIN_YEAR, VIN_LENGTH


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CarRow(Base):
    __tablename__ = "cars"

    car_id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False)
    make: Mapped[str] = mapped_column(String(64), nullable=False)
    model: Mapped[str] = mapped_column(String(64), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    vin: Mapped[Optional[str]] = mapped_column(String(VIN_LENGTH), nullable=True)
    mileage: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    last_service_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    # listing order only, never serialized
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    __table_args__ = (
        CheckConstraint(f"year >= {MIN_YEAR}", name="ck_cars_year_min"),
        CheckConstraint("mileage IS NULL OR mileage >= 0", name="ck_cars_mileage_non_negative"),
        CheckConstraint(f"vin IS NULL OR length(vin) = {VIN_LENGTH}", name="ck_cars_vin_length"),
        CheckConstraint("length(user_id) > 0 AND length(make) > 0 AND length(model) > 0",
                        name="ck_cars_required_not_empty"),
    )
