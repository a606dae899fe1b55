import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Resume Analyzer")
    PROJECT_VERSION: str = os.getenv("PROJECT_VERSION", "0.1.0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Parser heuristics
    LINE_Y_THRESHOLD: float = float(os.getenv("LINE_Y_THRESHOLD", "5"))
    CONTACT_ZONE_LINES: int = int(os.getenv("CONTACT_ZONE_LINES", "8"))

    # NLP settings
    SPACY_MODEL: str = os.getenv("SPACY_MODEL", "en_core_web_sm")

    # Service settings
    PARSE_TIMEOUT_SECONDS: float = float(os.getenv("PARSE_TIMEOUT_SECONDS", "30"))
    RESULT_CACHE_TTL_SECONDS: float = float(os.getenv("RESULT_CACHE_TTL_SECONDS", "300"))
    RESULT_CACHE_MAX_ENTRIES: int = int(os.getenv("RESULT_CACHE_MAX_ENTRIES", "256"))
    RESULT_CACHE_ENABLED: bool = os.getenv("RESULT_CACHE_ENABLED", "true").lower() in {"1", "true", "yes"}


settings = Settings()
