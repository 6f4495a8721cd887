import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_SEED_ROSTER = bool(int(os.getenv("AUTO_SEED_ROSTER", "0")))
STRICT_VALIDATION = bool(int(os.getenv("STRICT_VALIDATION", "1")))
UNIQUE_STAFF_IDS = bool(int(os.getenv("UNIQUE_STAFF_IDS", "1")))
