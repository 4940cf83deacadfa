from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str = "mongodb://localhost:27017/gatekeeper"
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    cors_origins: list[str] = []
    # The single credential accepted by both services
    auth_username: str = "admin"
    auth_password: str = "12345"
    auth_role: str = "admin"
    auth_user_id: str = "1"
    basic_realm: str = "Secure Area"  # Realm announced in the WWW-Authenticate challenge
    session_cookie_name: str = "auth_cookie_token"
    session_ttl_seconds: int = 300
    session_purge_interval: int = 0  # Seconds between expired-session purges, 0 disables the task
    session_ttl_index: bool = False  # Let MongoDB drop expired sessions through a TTL index on expires_at
    cookie_secure: bool = False  # Set to True in production with HTTPS

    model_config = {
        "env_file": [".env"],
        "env_prefix": "GATEKEEPER_",
        "extra": "ignore",
    }
