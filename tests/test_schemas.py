# tests/test_schemas.py
from datetime import date

import pytest
from pydantic import ValidationError

from garage.schemas import CarCreate, CarUpdate, field_errors


def test_create_coerces_numeric_strings_and_dates():
    car = CarCreate(user_id="u", make="Kia", model="Rio", year="2020", mileage="39492",
                    last_service_date="2024-01-31")
    assert car.year == 2020
    assert car.mileage == 39492
    assert car.last_service_date == date(2024, 1, 31)


def test_create_keeps_required_strings_as_sent():
    car = CarCreate(user_id=" u ", make=" Kia ", model="Rio", year=2020)
    assert (car.user_id, car.make) == (" u ", " Kia ")


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_blank_required_strings_are_rejected(value):
    with pytest.raises(ValidationError):
        CarCreate(user_id="u", make=value, model="Rio", year=2020)


def test_mileage_is_capped_at_the_integer_column_range():
    assert CarCreate(user_id="u", make="Kia", model="Rio", year=2020, mileage=2**63 - 1).mileage == 2**63 - 1
    with pytest.raises(ValidationError):
        CarCreate(user_id="u", make="Kia", model="Rio", year=2020, mileage=2**63)


@pytest.mark.parametrize("vin", ["1HGCM82633A00435", "1HGCM82633A0043521", "1HGCM82633A00435-"])
def test_vin_must_be_17_alphanumerics(vin):
    with pytest.raises(ValidationError):
        CarCreate(user_id="u", make="Kia", model="Rio", year=2020, vin=vin)


def test_lowercase_vin_is_accepted():
    assert CarCreate(user_id="u", make="Kia", model="Rio", year=2020, vin="1hgcm82633a004352").vin


def test_update_changes_only_contains_supplied_fields():
    assert CarUpdate(mileage=10).changes() == {"mileage": 10}
    assert CarUpdate().changes() == {}
    assert CarUpdate(vin=None).changes() == {"vin": None}


@pytest.mark.parametrize("field", ["user_id", "make", "model", "year"])
def test_update_rejects_null_for_required(field):
    with pytest.raises(ValidationError):
        CarUpdate(**{field: None})


def test_update_applies_year_range():
    with pytest.raises(ValidationError):
        CarUpdate(year=date.today().year + 2)


def test_field_errors_flattens_locations():
    with pytest.raises(ValidationError) as exc:
        CarCreate(user_id="u", model="Rio", year=1899, mileage=-1)
    errors = field_errors(exc.value.errors())
    assert {e["field"] for e in errors} == {"make", "year", "mileage"}
    assert all(set(e) == {"field", "message", "type"} for e in errors)


def test_field_errors_drops_body_prefix():
    errs = field_errors([{"loc": ("body", "vin"), "msg": "bad", "type": "string_pattern_mismatch"},
                         {"loc": ("body",), "msg": "missing", "type": "missing"}])
    assert errs == [
        {"field": "vin", "message": "bad", "type": "string_pattern_mismatch"},
        {"field": "body", "message": "missing", "type": "missing"},
    ]
