from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    root_path: str = ""
    log_level: str = "INFO"

    postgres_db: str = "family_reunion"
    postgres_user: str = "reunion_user"
    postgres_password: str = "reunion_pass"
    postgres_host: str = "db"
    postgres_port: int = 5432
    # Full SQLAlchemy URL; takes precedence over the postgres_* parts (e.g. sqlite for local runs).
    database_url_override: str = ""

    tree_root_mode: Literal["founders", "parentless"] = "founders"
    seed_demo_data: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
