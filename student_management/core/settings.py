from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(str, Enum):
    DEV = "dev"
    HML = "hml"
    PROD = "prod"


class Settings(BaseSettings):
    APP_ENV: Env = Env.DEV
    DEBUG: bool = False

    DATABASE_URL: str = "sqlite:///./students.db"

    # Mesmos defaults do emissor original; troque JWT_SECRET fora de dev.
    JWT_SECRET: str = "ChaveSecretaSuperSegura123456789012345678901234567890"
    JWT_ALG: str = "HS256"
    JWT_ISSUER: str = "StudentManagementAPI"
    JWT_AUDIENCE: str = "StudentManagementClient"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 120

    # Origens do SPA (Vite/CRA em dev), separadas por vírgula
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Cria as tabelas e popula o banco no startup (equivalente ao EnsureCreated)
    INIT_DB_ON_STARTUP: bool = True

    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


# cria instância global
settings = Settings()
