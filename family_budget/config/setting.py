from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Family Budget App"
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
    )
    port: int = 3000
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000"

    @property
    def parsed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    # Ledger settings
    timezone: str = "Asia/Tokyo"
    expense_initial_balance: int = 10000
    income_initial_balance: int = 0

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

settings = Settings()
