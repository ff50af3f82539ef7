"""Configuration and environment settings"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application configuration"""

    # Admission
    SUPPORTED_EXTENSIONS: List[str] = [".csv", ".xls", ".xlsx"]

    # Delimited text discovery (tried in this order)
    ENCODING_CANDIDATES: List[str] = ["utf-8", "windows-1252", "iso-8859-1"]
    DELIMITER_CANDIDATES: List[str] = [";", ",", "\t", "|"]

    # Type inference
    TYPE_INFERENCE_SAMPLE_SIZE: int = 500

    # Processing
    PROGRESS_YIELD_SECONDS: float = 0.05  # pause between files

    # Logging
    LOG_LEVEL: str = "WARNING"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
