import os
from pathlib import Path

import pytz


class Config:
    """Application configuration, read from the environment once per app."""

    def __init__(self, **overrides):
        self.ACCESS_TOKEN = os.environ.get("IRUASTRO_ACCESS_TOKEN")
        self.EPHE_PATH = os.environ.get("EPHE_PATH") or None
        self.DEFAULT_TIMEZONE = os.environ.get("DEFAULT_TIMEZONE", "Asia/Colombo")
        self.TRANSIT_MAX_DAYS = int(os.environ.get("TRANSIT_MAX_DAYS", 732))
        self.FLASK_ENV = os.environ.get("FLASK_ENV", "development")
        self.ALLOWED_ORIGINS = os.environ.get("ALLOWED_ORIGINS", "*").split(",")
        self.DEBUG = os.environ.get("DEBUG", "False").lower() == "true"
        self.TESTING = os.environ.get("TESTING", "False").lower() == "true"
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
        for key, value in overrides.items():
            if not hasattr(self, key):
                raise ValueError(f"Unknown configuration key: {key}")
            setattr(self, key, value)

    def validate(self):
        """Validate required configuration"""
        if not self.ACCESS_TOKEN:
            raise ValueError("IRUASTRO_ACCESS_TOKEN environment variable is required")

        if self.EPHE_PATH and not Path(self.EPHE_PATH).is_dir():
            raise ValueError(f"EPHE_PATH {self.EPHE_PATH} is not a valid directory")

        if self.DEFAULT_TIMEZONE not in pytz.all_timezones_set:
            raise ValueError(f"DEFAULT_TIMEZONE {self.DEFAULT_TIMEZONE} is not a known timezone")

        if self.TRANSIT_MAX_DAYS <= 0:
            raise ValueError("TRANSIT_MAX_DAYS must be positive")

        return True

    def to_dict(self):
        return {key: value for key, value in vars(self).items() if key.isupper()}
