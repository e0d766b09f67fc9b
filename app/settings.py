from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)


class Settings(BaseSettings):
    PROJECT_NAME: str = "flexframe"
    VERSION: str = "0.1.0"
    ENV: str = "dev"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Image selection ─────────────────────

    # Seed for the process-wide random source used to pick pool images.
    # Leave unset in production so repeated workouts get different images.
    IMAGE_RANDOM_SEED: int | None = None


settings = Settings()
