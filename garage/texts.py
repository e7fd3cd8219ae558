# garage/texts.py
ROOT_MSG = "Virtual Garage API is running!"

CAR_NOT_FOUND = "Car not found"
VALIDATION_FAILED = "Validation failed"
STORAGE_FAILED = "Internal server error"
