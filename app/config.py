from pydantic_settings import BaseSettings

from app.mappers.spreadsheet import DEFAULT_FILENAME


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    gemini_api_key: str
    gemini_model: str = "gemini-2.5-flash"
    request_timeout: float = 60.0
    export_filename: str = DEFAULT_FILENAME
    max_sessions: int = 1000
    log_level: str = "INFO"
