import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_SEED_DEMO = bool(int(os.getenv("AUTO_SEED_DEMO", "0")))

GEOFENCE_METHOD = os.getenv("GEOFENCE_METHOD", "flat")

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
INSIGHTS_MODEL = os.getenv("INSIGHTS_MODEL", "gemini-3-flash-preview")
INSIGHTS_TIMEOUT_SECONDS = float(os.getenv("INSIGHTS_TIMEOUT_SECONDS", "10"))
