# Файл конфігурації, завантажує змінні з .env
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    model_config = ConfigDict(extra="ignore", env_file=".env")

    # 1. Gemini (для AI-резюме). Без ключа форма показує помилку ще до запиту.
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # 2. CORS (кома-сепарейтед список)
    FRONTEND_ORIGIN: str = ""

    # 3. Інтерфейс
    APP_TITLE: str = "Hesaplama Araçları"
    APP_VERSION: str = "1.0.0"


settings = Settings()
