from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    # Environment configuration
    environment: str = os.getenv("ENVIRONMENT", "development")

    # Supabase configuration
    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_key: str = os.getenv("SUPABASE_KEY", "")

    # Database configuration (for SQLAlchemy - connects to Supabase PostgreSQL)
    database_url: Optional[str] = os.getenv("DATABASE_URL", "")
    database_echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

    # Frontend URL (for CORS)
    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # JWT configuration (used by Supabase)
    jwt_secret_key: str = os.getenv("JWT_SECRET_KEY", "your-secret-key-change-this")
    jwt_algorithm: str = "HS256"

    # OpenRouter (OpenAI-compatible) completion endpoint
    openrouter_api_key: str = os.getenv("OPENROUTER_API_KEY", os.getenv("OPENROUTER_API", ""))
    openrouter_base_url: str = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
    app_title: str = os.getenv("APP_TITLE", "ValorMind AI")
    app_referer: str = os.getenv("APP_REFERER", "https://valormind.ai")

    # Chat generation params
    chat_model: str = os.getenv("CHAT_MODEL", "baidu/ernie-4.5-21b-a3b")
    chat_temperature: float = float(os.getenv("CHAT_TEMPERATURE", 0.75))
    chat_max_tokens: int = int(os.getenv("CHAT_MAX_TOKENS", 1024))

    # Therapy insight generation params
    insights_model: str = os.getenv("INSIGHTS_MODEL", "baidu/ernie-4.5-300b-a47b")
    insights_temperature: float = float(os.getenv("INSIGHTS_TEMPERATURE", 0.3))
    insights_max_tokens: int = int(os.getenv("INSIGHTS_MAX_TOKENS", 1024))

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
