from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_dir: str = "logs"

    # Bonk / Raydium LaunchLab account routing
    bonk_program_id: str = "LanMV9sAd7wArD4vJFi2qDdfnVhFxYSUg6eADduJ3uj"
    bonk_verify_owner: bool = True  # Drop accounts not owned by bonk_program_id


settings = Settings()
