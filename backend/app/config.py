from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Listings Service"
    debug: bool = False
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    database_url: str = "sqlite:///./listings.db"

    cors_origins: str = "http://localhost:5173"

    # Header an upstream auth proxy uses to forward the caller's user id
    # when it does not set request.state.user_id itself.
    caller_id_header: str = "X-User-Id"

    # Error responses carry the raw error detail under "error" when enabled.
    expose_error_details: bool = True

    model_config = {"env_file": ".env"}


settings = Settings()
