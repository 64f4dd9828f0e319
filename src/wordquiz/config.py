import os
from pathlib import Path
from typing import List

BASE_DIR = Path(__file__).resolve().parent


def _env_list(name: str, default: str) -> List[str]:
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    PROJECT_NAME: str = "wordquiz"
    DEBUG: bool = os.environ.get("WORDQUIZ_DEBUG", "0") == "1"
    LOG_DIR: str = os.environ.get("WORDQUIZ_LOG_DIR", "log")
    LOG_FILE: str = "wordquiz.log"
    LOG_TO_DB: bool = os.environ.get("WORDQUIZ_LOG_TO_DB", "0") == "1"
    DB_DIR: str = os.environ.get("WORDQUIZ_DB_DIR", "db")
    DB_FILE: str = "wordquiz.db"
    TEMPLATE_DIR: str = str(BASE_DIR / "templates")
    STATIC_DIR: str = str(BASE_DIR / "static")
    VOCAB_DIR: str = os.environ.get("WORDQUIZ_VOCAB_DIR", str(BASE_DIR / "data"))
    SOURCES: List[str] = _env_list("WORDQUIZ_SOURCES", "nouns,verbs,pronouns")
    SOURCE_LANGUAGE: str = "Spanish"
    TARGET_LANGUAGE: str = "English"
    DEFAULT_DIRECTION: str = os.environ.get("WORDQUIZ_DIRECTION", "source_to_target")
    HINT_THRESHOLD: int = int(os.environ.get("WORDQUIZ_HINT_THRESHOLD", "3"))
    HINT_PLACEHOLDER: str = os.environ.get("WORDQUIZ_HINT_PLACEHOLDER", "Type your answer...")
    SESSION_COOKIE_NAME: str = "quiz_session_id"
    SESSION_TIMEOUT_MINUTES: int = 120
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
