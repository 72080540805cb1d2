import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DB_FILE = Path(os.getenv("DB_FILE", BASE_DIR / "db.json"))
    PUBLIC_DIR = Path(os.getenv("PUBLIC_DIR", BASE_DIR / "public"))
    DOCS_FILE = Path(os.getenv("DOCS_FILE", BASE_DIR / "API_DOCUMENTATION.md"))
    APP_TITLE = "JSON Server"
    SERVER_VERSION = "1.0.0"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # JSON bodies up to 10 MB
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False


class TestConfig(Config):
    TESTING = True
