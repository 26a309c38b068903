"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


FIREBASE_JWKS_URL = (
    "https://www.googleapis.com/service_accounts/v1/jwk/"
    "securetoken@system.gserviceaccount.com"
)


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="PantryKeeper", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # MongoDB settings
    mongo_uri: str = Field(
        default="mongodb://localhost:27017/?replicaSet=rs0",
        description="MongoDB connection URI (replica set required for batch commits)",
    )
    mongo_db_name: str = Field(default="pantrykeeper", description="MongoDB database name")
    mongo_timeout_ms: int = Field(
        default=5000, ge=100, description="Server selection timeout in milliseconds"
    )

    # Identity provider settings
    auth_project_id: str = Field(
        default="", description="Identity provider project id (Firebase project)"
    )
    auth_issuer: str = Field(
        default="", description="Expected token issuer; derived from project id if empty"
    )
    auth_audience: str = Field(
        default="", description="Expected token audience; project id if empty"
    )
    auth_jwks_url: str = Field(
        default=FIREBASE_JWKS_URL, description="JWKS endpoint for token signing keys"
    )
    auth_secret: Optional[str] = Field(
        default=None, description="Shared HS256 secret (development and testing only)"
    )
    auth_algorithms: list[str] = Field(
        default=["RS256"], description="Accepted token signing algorithms"
    )
    auth_exempt_paths: list[str] = Field(
        default=["/health"], description="Paths that skip authentication"
    )

    # Language model settings
    openai_api_key: Optional[str] = Field(
        default=None, description="OpenAI API key; NLP features are disabled without it"
    )
    openai_chat_model: str = Field(default="gpt-3.5-turbo", description="Chat model")
    openai_vision_model: str = Field(default="gpt-4o", description="Vision-capable model")
    openai_timeout_sec: float = Field(default=60.0, gt=0, description="Request timeout")

    # Food database settings
    edamam_app_id: Optional[str] = Field(default=None, description="Edamam app id")
    edamam_app_key: Optional[str] = Field(default=None, description="Edamam app key")
    edamam_base_url: str = Field(
        default="https://api.edamam.com/api/food-database/v2",
        description="Edamam food database base URL",
    )
    edamam_timeout_sec: float = Field(default=15.0, gt=0, description="Request timeout")

    # Scheduled expiry check
    expiry_check_enabled: bool = Field(
        default=True, description="Run the daily expiring-items sweep"
    )
    expiry_check_cron: str = Field(default="0 0 * * *", description="Crontab expression")
    expiry_check_timezone: str = Field(
        default="America/New_York", description="Timezone for the crontab expression"
    )
    expiry_window_days: int = Field(
        default=3, ge=1, le=30, description="Days ahead that count as expiring soon"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(
        default="PantryKeeper API", description="API documentation title"
    )
    api_description: str = Field(
        default="Household pantry, shopping list, meal plan and recipe management",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING

    @property
    def token_issuer(self) -> Optional[str]:
        if self.auth_issuer:
            return self.auth_issuer
        if self.auth_project_id:
            return f"https://securetoken.google.com/{self.auth_project_id}"
        return None

    @property
    def token_audience(self) -> Optional[str]:
        return self.auth_audience or self.auth_project_id or None


# Global settings instance
settings = Settings()
