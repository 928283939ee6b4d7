from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "local"
    log_level: str = "INFO"

    # пагинация по умолчанию для HTTP-слоя
    default_page_size: int = 20
    max_page_size: int = 500

    # demo: диалект, в котором печатаем итоговый SQL
    demo_dialect: str = "postgresql"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
