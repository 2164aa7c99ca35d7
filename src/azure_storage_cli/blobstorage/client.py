"""Blob service client configuration and management.

The BlobServiceManager builds the async ``BlobServiceClient`` from a
storage account name and shared key, and owns its lifetime: the client is
created lazily and closed when the manager is used as an async context
manager.

Example:
    config = BlobClientConfig(account_name="myaccount", account_key="...")
    async with BlobServiceManager(config) as service:
        container = service.get_container_client("data")
"""

from typing import Any, Dict, Optional

from azure.storage.blob.aio import BlobServiceClient
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from azure_storage_cli.core import get_logger, settings
from azure_storage_cli.schemas import ResolvedCredentials

logger = get_logger(__name__)


class BlobClientConfig(BaseModel):
    """Configuration for blob service connections."""

    model_config = ConfigDict(extra="forbid")

    account_name: str = Field(..., description="Storage account name")
    account_key: SecretStr = Field(..., description="Storage account shared key")
    endpoint_suffix: str = Field(
        default_factory=lambda: settings.endpoint_suffix,
        description="DNS suffix of the blob endpoint",
    )

    @classmethod
    def from_credentials(cls, credentials: ResolvedCredentials) -> "BlobClientConfig":
        return cls(
            account_name=credentials.account_name,
            account_key=credentials.account_key,
        )

    @property
    def account_url(self) -> str:
        return f"https://{self.account_name}.blob.{self.endpoint_suffix}"


class BlobServiceManager:
    """Manages the blob service client and its lifetime."""

    def __init__(self, config: BlobClientConfig):
        self.config = config
        self._client: Optional[BlobServiceClient] = None
        logger.info("Blob service manager initialized", account=config.account_name)

    @property
    def client(self) -> BlobServiceClient:
        """Get or create the blob service client."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> BlobServiceClient:
        """Create the async BlobServiceClient with shared key credentials."""
        credential = {
            "account_name": self.config.account_name,
            "account_key": self.config.account_key.get_secret_value(),
        }
        client = BlobServiceClient(
            account_url=self.config.account_url, credential=credential
        )
        logger.info("Blob service client created", account_url=self.config.account_url)
        return client

    def describe(self) -> Dict[str, Any]:
        """Client state for debug output, without the shared key."""
        client = self.client
        return {
            "account_name": client.account_name,
            "url": client.url,
            "api_version": client.api_version,
            "credential": "SharedKey(**********)",
        }

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def __aenter__(self) -> BlobServiceClient:
        return self.client

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
