# The module is to define the configuration settings for the application.
# Date: 2025-09-02
# Version: 1.0.0

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    The Settings class is used to define the configuration settings for the application.
    It inherits from BaseSettings, which allows it to load environment variables
    and provides type validation for the settings. Settings are frozen once loaded.
    Attributes:
        SERVER_NAME (str): The name the server identifies itself with.
        SERVER_VERSION (str): The version the server reports.
        CYBER_API_BASE_URL (str): Base URL of the Cyber API.
        CYBER_API_AUTH_KEY (str): Value sent in the AUTH_KEY header. Empty disables the header.
        CYBER_API_TIMEOUT_MS (int): Deadline for a single API request, in milliseconds.
    """
    # Server identity
    SERVER_NAME: str = "cyber-mcp-demo"
    SERVER_VERSION: str = "1.0.0"

    # CYBER_API
    CYBER_API_BASE_URL: str = Field(
        default="https://demo-api.cyber-i.com",
        description="API base URL (e.g. https://demo-api.cyber-i.com)",
    )
    CYBER_API_AUTH_KEY: str = Field(
        default="19295064DEBE4954B259E16A49D2F15711540431",
        description="AUTH_KEY request header value (may be left empty)",
    )
    CYBER_API_TIMEOUT_MS: int = Field(default=5000, gt=0, description="HTTP timeout (ms)")

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'
        frozen = True

    @property
    def timeout_seconds(self) -> float:
        return self.CYBER_API_TIMEOUT_MS / 1000


# lru_cache to cache the settings instance.
@lru_cache
def get_settings() -> Settings:
    return Settings()


if __name__ == "__main__":
    settings = get_settings()
    print(settings.model_dump_json(indent=4))
