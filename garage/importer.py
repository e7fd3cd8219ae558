# garage/importer.py
from __future__ import annotations
import logging
import os
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import ValidationError

from garage.schemas import CarCreate, field_errors
from garage.storage.base import CarStore

logger = logging.getLogger(__name__)

# Column synonyms -> car field
SYNONYMS = {
    "user_id":           ["user_id", "userid", "user", "owner", "owner_id"],
    "make":              ["make", "brand", "marca", "manufacturer"],
    "model":             ["model", "modelo"],
    "year":              ["year", "model_year", "anio", "año"],
    "vin":               ["vin", "vin_number"],
    "mileage":           ["mileage", "km", "kilometraje", "odometer", "miles"],
    "last_service_date": ["last_service_date", "last_service", "service_date"],
}
REQUIRED = ["user_id", "make", "model", "year"]


def normalize_columns(df: pd.DataFrame, default_user_id: Optional[str] = None) -> pd.DataFrame:
    """
    Renames known synonyms to car field names and keeps only those columns.
    `default_user_id` fills a missing user_id column.
    """
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]

    rename = {}
    for target, alts in SYNONYMS.items():
        if target in df.columns:
            continue
        for col in df.columns:
            if col in alts:
                rename[col] = target
                break
    if rename:
        df = df.rename(columns=rename)

    if "user_id" not in df.columns and default_user_id:
        df["user_id"] = default_user_id

    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in CSV (after mapping): {missing}")

    return df[[c for c in SYNONYMS if c in df.columns]]


def _clean(record: Dict[str, Any]) -> Dict[str, Any]:
    # empty cells mean "not provided"
    return {k: (v.strip() or None) if isinstance(v, str) else v for k, v in record.items()}


def import_csv(path: str, store: CarStore, default_user_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads cars from a CSV into `store`.
    Every row goes through the same validation as POST /cars; invalid rows are
    skipped and reported with their line number. Returns {inserted, skipped, errors}.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"CSV not found at {os.path.abspath(path)}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df = normalize_columns(df, default_user_id=default_user_id)

    inserted = 0
    errors: List[Dict[str, Any]] = []
    for i, record in enumerate(df.to_dict(orient="records")):
        line = i + 2  # header is line 1
        try:
            car = CarCreate.model_validate(_clean(record))
        except ValidationError as e:
            errors.append({"line": line, "errors": field_errors(e.errors())})
            continue
        store.insert(car.model_dump())
        inserted += 1

    logger.info("Imported %d cars from %s (%d skipped)", inserted, path, len(errors))
    return {"inserted": inserted, "skipped": len(errors), "errors": errors}
