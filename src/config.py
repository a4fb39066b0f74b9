from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    log_level: str = "INFO"
    log_json: bool = False

    # Subscribe the audit log listener when the catalog is built
    audit_log_enabled: bool = True


settings = Settings()
