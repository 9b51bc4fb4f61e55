from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_TEMPLATES_DIR = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    # Directory holding one <name>.jinja2 file per registered template
    TEMPLATES_DIR: Path = PACKAGE_TEMPLATES_DIR

    # Email bodies are HTML, so escape context values unless told otherwise
    AUTOESCAPE: bool = True

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(
        env_prefix="EMAIL_TEMPLATES_",
        env_file=".env",
        extra="ignore",
    )

# Singleton instance
settings = Settings()
