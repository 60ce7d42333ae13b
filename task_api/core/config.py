from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./tasks.db")
    SQL_ECHO = getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()
    DEFAULT_PAGE_SIZE = int(getenv("DEFAULT_PAGE_SIZE", "10"))  # taille de page par défaut pour GET /tasks

settings = Settings()
