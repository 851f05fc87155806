from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Zoo Service"
    description: str = "Zoo and Animal registry API"
    version: str = "1.0.0"
    docs_url: str = "/docs"
    redoc_url: str = "/redoc"
    cors_origins: list[str] = ["*"]

    database_url: str = "sqlite:///./zoo_service.db"
    sql_echo: bool = False
    log_level: str = "INFO"

    # Header carrying the already-authenticated principal
    caller_header: str = "X-Caller-Id"
    anonymous_caller: str = "2vxsx-fae"
    enforce_zoo_ownership: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "allow"


settings = Settings()
