"""
Application settings.

Values come from environment variables with the BMI_ prefix
(a local .env file is loaded first), e.g. BMI_CLEAR_RESULT_ON_ERROR=true.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BMI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    app_title: str = Field(default="BMI Calculator")

    # "metric" (cm) or "imperial" (feet + inches) for GET / without ?mode=
    default_mode: str = Field(default="metric")

    # False keeps the last result on screen next to a new error message
    clear_result_on_error: bool = Field(default=False)

    log_level: str = Field(default="INFO")


# Global settings instance
settings = Settings()
