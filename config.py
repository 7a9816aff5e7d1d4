"""
Configuration management for PathFinder.
Loads settings from environment variables / .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# Error log file (WARNING and ERROR from all loggers are appended here)
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
ERROR_LOG_FILE = LOG_DIR / os.getenv("ERROR_LOG_FILE", "error_log.txt")

# Ensure log directory exists
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Flask
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
HOST = os.getenv("HOST", "0.0.0.0")
# The PORT will be set by the deployment service, or 3001 for local testing
PORT = int(os.getenv("PORT", "3001"))
DEBUG = os.getenv("DEBUG", "false").strip().lower() in ("true", "1", "yes")

# ── Frontend ───────────────────────────────────────────────────
# Compiled single-page app. Anything outside API_PREFIX is served from here,
# falling back to index.html so client-side routes survive a reload.
BUILD_DIR = BASE_DIR / os.getenv("BUILD_DIR", "build")
API_PREFIX = "/" + os.getenv("API_PREFIX", "/api").strip("/")

# Comma-separated list of allowed origins for the API, "*" allows any.
CORS_ORIGINS_RAW = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS = [o.strip() for o in CORS_ORIGINS_RAW.split(",") if o.strip()] or ["*"]

# Opportunity categories shown on the browse screen (name → card blurb).
# Same order as the frontend category grid.
OPPORTUNITY_CATEGORIES = {
    "Internship":        "Gain practical experience.",
    "Competition":       "Battle for excellence.",
    "Webinar":           "Learn from experts.",
    "Online Course":     "Refine your skills.",
    "Community Service": "Make an impact.",
}
