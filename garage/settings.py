# garage/settings.py

# Oldest model year accepted; the newest is always current year + 1
MIN_YEAR = 1900

VIN_LENGTH = 17
VIN_PATTERN = rf"^[A-Za-z0-9]{{{VIN_LENGTH}}}$"

# Largest value an SQLite INTEGER column holds
MAX_INTEGER = 2**63 - 1

# Record seeded into an empty store on startup
EXAMPLE_CAR = {
    "user_id": "user123",
    "make": "Toyota",
    "model": "Camry",
    "year": 2020,
    "vin": "4T1BF1FK5CU123456",
    "mileage": 50000,
    "last_service_date": "2023-11-15",
}
