from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Remote invoice endpoint
    INVOICE_API_BASE_URL: str = "https://storage.googleapis.com/xmm-homework/"
    INVOICE_ENDPOINT: str = "invoices.json"
    INVOICE_EMPTY_ENDPOINT: str = "invoices_empty.json"
    USE_EMPTY_ENDPOINT: bool = False

    # HTTP timeouts (seconds)
    HTTP_CONNECT_TIMEOUT: float = 60.0
    HTTP_READ_TIMEOUT: float = 60.0

    # Display
    SHORT_ID_LENGTH: int = 8

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

settings = Settings()
