# orghooks/config/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import pathlib
from dotenv import load_dotenv

# Charger explicitement le fichier .env
env_path = pathlib.Path(__file__).parent / ".env"
load_dotenv(env_path)

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=env_path,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field("orghooks")
    debug: bool = Field(False)

    # GitHub
    GITHUB_API_URL: str = Field("https://api.github.com/")
    GITHUB_TOKEN: str = Field("")
    GITHUB_USER_AGENT: str = Field("orghooks")
    GITHUB_TIMEOUT: float = Field(30)  # seconds

    # Logging (empty = console only)
    LOG_FILE: str = Field("")

settings = Settings()
