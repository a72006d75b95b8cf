import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the demo locations/employees/attendance on startup.
AUTO_SEED_DEMO = bool(int(os.getenv("AUTO_SEED_DEMO", "1")))

# "flat" (degree-space approximation) or "haversine".
GEOFENCE_METHOD = os.getenv("GEOFENCE_METHOD", "flat")

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
INSIGHTS_MODEL = os.getenv("INSIGHTS_MODEL", "gemini-3-flash-preview")
INSIGHTS_TIMEOUT_SECONDS = float(os.getenv("INSIGHTS_TIMEOUT_SECONDS", "20"))
