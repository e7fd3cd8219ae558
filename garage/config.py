# garage/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Storage backend: "sqlite" (persisted) or "memory"
CAR_STORE = os.getenv("CAR_STORE", "sqlite").strip().lower()

CARS_DB_PATH = os.getenv("CARS_DB_PATH", os.path.join("data", "cars.db"))
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{CARS_DB_PATH}"
SQL_ECHO = os.getenv("SQL_ECHO", "0") == "1"

# Inserts one example car when the store starts empty (dev convenience)
SEED_EXAMPLE = os.getenv("SEED_EXAMPLE", "1") == "1"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
