"""API settings."""
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from knowledge_search_core.util.errors import StartupConfigError


class Settings(BaseSettings):
    """Application settings, read from the environment."""

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"

    pinecone_api_key: str = Field(..., min_length=1)
    index_host: str = Field(..., min_length=1)
    index_name: str = Field(..., min_length=1)
    namespace: str = "__default__"

    openai_api_key: str = Field(..., min_length=1)
    embed_model: str = "text-embedding-3-small"
    top_k: int = Field(5, ge=1)
    max_body_bytes: int = Field(1024 * 1024, ge=1)

    # Inbound shared secret; auth is off when unset
    knowledge_api_key: str | None = None

    class Config:
        env_file = ".env"
        extra = "ignore"

    @field_validator("knowledge_api_key")
    @classmethod
    def _blank_key_is_unset(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v


def load_settings(**overrides) -> Settings:
    """Build settings, raising StartupConfigError naming every bad variable."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = []
        for err in e.errors():
            name = str(err["loc"][0]).upper() if err["loc"] else "?"
            if name not in missing:
                missing.append(name)
        raise StartupConfigError(missing) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return load_settings()
