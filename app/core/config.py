from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    # Core
    APP_NAME: str = "SlideRender"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Browser
    MAX_BROWSER_SESSIONS: int = 4
    BROWSER_ARGS: List[str] = [
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
    ]
    SCREENSHOT_TIMEOUT_MS: int = 60000
    SCREENSHOT_WIDTH_PX: int = 800
    SCREENSHOT_HEIGHT_PX: int = 600

    # Slide geometry (px, landscape)
    SLIDE_WIDTH_PX: int = 1080
    SLIDE_HEIGHT_PX: int = 810
    DEVICE_SCALE_FACTOR: float = 1.0
    SLIDE_FONT_URL: str = (
        "https://fonts.gstatic.com/s/liberationsans/v14/mem5YaGs126MiZpBA-UN_r8OUuhp.ttf"
    )

    # CORS
    CORS_ORIGINS: List[str] = ["*"]


settings = Settings()
