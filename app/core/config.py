from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    # Service
    APP_NAME: str = "resume-confidence-parser"
    LOG_LEVEL: str = "INFO"

    # Upload policy (decoding PDF/DOCX happens upstream; only text is accepted here)
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024  # 10MB
    SUPPORTED_TEXT_EXTENSIONS: List[str] = [".txt", ".md"]

    # Parsing
    SUMMARY_MAX_CHARS: int = 500
    REFERENCE_YEAR: Optional[int] = None  # None -> current calendar year

    model_config = SettingsConfigDict(env_prefix="RESUME_PARSER_", env_file=".env", extra="ignore")


settings = Settings()
