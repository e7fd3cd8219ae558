# garage/schemas.py
from datetime import date
from typing import Annotated, Any, Dict, Iterable, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, field_validator

from garage.settings import MAX_INTEGER, MIN_YEAR, VIN_PATTERN


def _check_year(year: int) -> int:
    max_year = date.today().year + 1
    if not MIN_YEAR <= year <= max_year:
        raise ValueError(f"year must be between {MIN_YEAR} and {max_year}")
    return year


def _check_not_blank(value: str) -> str:
    # stored as sent; only whitespace-only values are refused
    if not value.strip():
        raise ValueError("must not be empty or blank")
    return value


NonEmptyStr = Annotated[str, AfterValidator(_check_not_blank)]
ModelYear = Annotated[int, AfterValidator(_check_year)]
Vin = Annotated[str, StringConstraints(pattern=VIN_PATTERN)]
Mileage = Annotated[int, Field(ge=0, le=MAX_INTEGER)]


class CarCreate(BaseModel):
    """Body of POST /cars. Unknown keys (car_id included) are ignored."""
    user_id: NonEmptyStr
    make: NonEmptyStr
    model: NonEmptyStr
    year: ModelYear
    vin: Optional[Vin] = None
    mileage: Optional[Mileage] = None
    last_service_date: Optional[date] = None


class CarUpdate(BaseModel):
    """
    Body of PUT /cars/{car_id}: any subset of the car fields.
    Omitted fields stay as they are; null clears an optional field.
    """
    user_id: Optional[NonEmptyStr] = None
    make: Optional[NonEmptyStr] = None
    model: Optional[NonEmptyStr] = None
    year: Optional[ModelYear] = None
    vin: Optional[Vin] = None
    mileage: Optional[Mileage] = None
    last_service_date: Optional[date] = None

    @field_validator("user_id", "make", "model", "year", mode="before")
    @classmethod
    def _required_not_null(cls, v):
        if v is None:
            raise ValueError("field is required and cannot be null")
        return v

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class Car(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    car_id: str
    user_id: str
    make: str
    model: str
    year: int
    vin: Optional[str] = None
    mileage: Optional[int] = None
    last_service_date: Optional[date] = None


class FieldError(BaseModel):
    field: str
    message: str
    type: str


def field_errors(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flattens pydantic/FastAPI error dicts into [{field, message, type}].
    The leading "body" segment of request locations is dropped.
    """
    out = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        out.append(
            FieldError(
                field=".".join(loc) or "body",
                message=str(err.get("msg", "")),
                type=str(err.get("type", "")),
            ).model_dump()
        )
    return out
