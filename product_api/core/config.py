from functools import lru_cache
from typing import Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ProductAPI"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Mongo
    MONGO_URI: str # required, opaque connection string
    MONGO_DB: str = "products_db"              # used when the URI carries no database
    MONGO_COLLECTION: str = "products"
    MONGO_TLS: bool = False                    # Atlas / managed clusters
    MONGO_TIMEOUT_MS: int = 6000               # server selection + connect

    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
