"""Client configuration with environment variable loading.

Pydantic-based configuration for the chat and document backend client.
Every field can be overridden from the environment or a .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:8000"
DEFAULT_SESSION_FILE = Path.home() / ".docchat" / "session.json"
# The session flag is shared by every browser that reaches the server,
# so only the local machine is served unless HOST says otherwise.
DEFAULT_UI_HOST = "127.0.0.1"


class ClientConfig(BaseModel):
    """Configuration for the docchat client.

    Attributes:
        api_base_url: Base URL of the chat/document backend.
        auth_url: Sign-in endpoint (defaults to {api_base_url}/login/).
        document_limit: Number of related documents requested per search.
        session_file: Where the logged-in flag is persisted.
        ui_host: Interface the NiceGUI server binds to.
        ui_port: Port the NiceGUI server listens on.
        storage_secret: Secret used by NiceGUI for browser storage.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
        description="Base URL of the chat/document backend",
    )
    auth_url: str = Field(
        default_factory=lambda: os.getenv("AUTH_URL", ""),
        description="Sign-in endpoint URL",
    )
    document_limit: int = Field(
        default_factory=lambda: int(os.getenv("DOCUMENT_LIMIT", "3")),
        ge=1,
        le=50,
        description="Number of related documents requested per search",
    )
    session_file: Path = Field(
        default_factory=lambda: Path(
            os.getenv("DOCCHAT_SESSION_FILE", str(DEFAULT_SESSION_FILE))
        ).expanduser(),
        description="Path of the persisted session flag",
    )
    ui_host: str = Field(default_factory=lambda: os.getenv("HOST", DEFAULT_UI_HOST))
    ui_port: int = Field(
        default_factory=lambda: int(os.getenv("PORT", "8080")),
        ge=1,
        le=65535,
    )
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "docchat-secret"),
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate that the backend URL is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API base URL required. Set API_BASE_URL in .env")
        return v.strip()

    @model_validator(mode="after")
    def default_auth_url(self) -> "ClientConfig":
        """Derive the sign-in URL from the backend URL when not set."""
        if not self.auth_url.strip():
            self.auth_url = f"{self.api_base_url.rstrip('/')}/login/"
        else:
            self.auth_url = self.auth_url.strip()
        return self


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If API_BASE_URL is set to an empty value.
    """
    return ClientConfig()
