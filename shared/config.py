from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # AI audit capability
    ANTHROPIC_API_KEY: str = ""
    AUDIT_MODEL: str = "claude-sonnet-4-20250514"
    AUDIT_MAX_TOKENS: int = 4096

    # Explorer
    ETHERSCAN_API_KEY: str = ""
    ETHERSCAN_API_URL: str = "https://api.etherscan.io/v2/api"
    CHAIN_ID: int = 1
    EXPLORER_TIMEOUT: float = 15.0

    # Audit jobs
    AUDIT_JOB_TTL_SECONDS: int = 1800  # Finished sessions kept for polling

    # Application
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
