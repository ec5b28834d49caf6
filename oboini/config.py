from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OBOINI_", env_file=".env", extra="ignore")

    # Encoding settings
    eol: str = "\n"
    encode_whitespace: bool = False

    # Decoding settings
    legacy_xref_labels: bool = False  # label every xref target "Xref"

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
