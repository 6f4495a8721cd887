import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the sample gym roster on startup
AUTO_SEED_ROSTER = bool(int(os.getenv("AUTO_SEED_ROSTER", "1")))

# Reject negative amounts / empty names when hiring
STRICT_VALIDATION = bool(int(os.getenv("STRICT_VALIDATION", "0")))
UNIQUE_STAFF_IDS = bool(int(os.getenv("UNIQUE_STAFF_IDS", "1")))
