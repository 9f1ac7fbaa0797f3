"""Runtime configuration, read from CIPHER_* environment variables or .env."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Session defaults."""

    # Seconds to wait before revealing each character
    reveal_delay: float = 0.05

    # Caesar key field accepts at most this many characters
    caesar_key_max_length: int = 9

    # Cipher selected when a session starts
    default_variant: str = "caesar"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CIPHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
