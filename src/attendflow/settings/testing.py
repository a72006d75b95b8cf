SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_SEED_DEMO = False

GEOFENCE_METHOD = "flat"

# Never call out from tests.
GEMINI_API_KEY = ""
INSIGHTS_MODEL = "gemini-3-flash-preview"
INSIGHTS_TIMEOUT_SECONDS = 1.0
