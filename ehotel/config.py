import os


DATABASE_URL = os.getenv("EHOTEL_DATABASE_URL", "sqlite:///./data/ehotel.db")
LOG_LEVEL = os.getenv("EHOTEL_LOG_LEVEL", "INFO").upper()
SQL_ECHO = os.getenv("EHOTEL_SQL_ECHO", "false").strip().lower() in ("1", "true", "yes")
