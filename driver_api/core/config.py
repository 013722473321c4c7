import os
from dotenv import load_dotenv
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_PATH)

class Settings:
    """
    A class to hold all application settings.
    It reads settings from environment variables and .env file.
    Keyword arguments override the environment (used by tests and scripts).
    """

    def __init__(self, **overrides):
        # --- Project Settings ---
        self.PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Driver API")

        # --- Database Settings ---
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./drivers.db")

        # --- Logging Settings ---
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_FILE: str = os.getenv("LOG_FILE", "")  # empty = console only

        # --- Driver Settings ---
        self.RANDOM_DRIVER_COUNT: int = int(os.getenv("RANDOM_DRIVER_COUNT", "10"))
        self.DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)

settings = Settings()

if not settings.DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is not set.")
