"""
EstateAI Config Module
----------------------
Zentrale Konfiguration für den EstateAI Recommender.

Beinhaltet:
- Umgebungsvariablen
- Scraper-Settings
- Ranking-Gewichte
- API-Settings
- Logging-Konfiguration
"""

import os
from dotenv import load_dotenv

# -----------------------------
# Load .env if available
# -----------------------------
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# -----------------------------
# Scraper configuration
# -----------------------------
SCRAPER = {
    "SITE_ORIGIN": "https://www.realtor.com",
    "BASE_URL": "https://www.realtor.com/realestateandhomes-search/",
    "HEADLESS": _env_bool("ESTATEAI_HEADLESS", True),
    "NAV_TIMEOUT": int(os.getenv("ESTATEAI_NAV_TIMEOUT", "30000")),
    "NAV_RETRIES": int(os.getenv("ESTATEAI_NAV_RETRIES", "0")),
    "MAX_PROPERTIES": 20,
    "TOP_K": 10,
}

# -----------------------------
# Ranking weights
# -----------------------------
# Gewichte und Divisoren des Scoring-Modells, pro Recommender überschreibbar
RANKING = {
    "PRICE_WEIGHT": 30,
    "OVER_BUDGET_PENALTY": 10,
    "RECENCY_MAX": 20,
    "RECENCY_DIVISOR": 10,
    "SPACE_MAX": 20,
    "SPACE_DIVISOR": 100,
    "BEDS_EXACT_BONUS": 15,
    "BEDS_ABOVE_BONUS": 10,
    "BATHS_BONUS": 10,
}

# -----------------------------
# Logging configuration
# -----------------------------
LOGGING = {
    "LOG_FILE": os.getenv("ESTATEAI_LOG_FILE"),
    "LEVEL": os.getenv("LOG_LEVEL", "INFO"),
    "FORMAT": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
}

# -----------------------------
# API configuration
# -----------------------------
API = {
    "HOST": "0.0.0.0",
    "PORT": int(os.getenv("PORT", "8000")),
    "RELOAD": True,
    "TITLE": "EstateAI Recommender API",
    "DESCRIPTION": "Preference-driven property recommendations from realtor.com listings",
}


# -----------------------------
# Config classes
# -----------------------------
class Config:
    DEBUG = False
    TESTING = False
    SCRAPER = SCRAPER
    RANKING = RANKING
    LOGGING = LOGGING
    API = API


class DevConfig(Config):
    DEBUG = True
    LOGGING = {**LOGGING, "LEVEL": os.getenv("LOG_LEVEL", "DEBUG")}


class ProdConfig(Config):
    DEBUG = False
    SCRAPER = {**SCRAPER, "HEADLESS": True}
    API = {**API, "RELOAD": False}
    LOGGING = {**LOGGING, "LEVEL": os.getenv("LOG_LEVEL", "INFO")}


# active config
ACTIVE_CONFIG = ProdConfig() if os.getenv("ENV") == "prod" else DevConfig()
