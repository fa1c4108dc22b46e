from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Course Builder API"
    app_env: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS: comma-separated origins (e.g. "https://learn.yourdomain.com")
    cors_allow_origins: str = "http://localhost:5173"

    # Static catalog snapshot
    data_dir: Path = DEFAULT_DATA_DIR

    # Learner-side
    api_base_url: str = "http://localhost:3000"
    passing_score: int = 70

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


settings = Settings()
