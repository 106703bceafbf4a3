import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    SCHEMA_DIR: str = os.getenv("SCHEMA_DIR", "")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
