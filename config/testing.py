SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_SEED_ROSTER = True
STRICT_VALIDATION = False
UNIQUE_STAFF_IDS = True
