"""Configuration and request schemas for azure-storage."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from azure_storage_cli.core.exceptions import ArgumentError


class StorageConfig(BaseModel):
    """Effective configuration, as read from the JSON config file.

    Empty strings mean "unset".
    """

    model_config = ConfigDict(extra="ignore")

    storage_account: str = Field(default="", description="Storage account name")
    storage_master_key: SecretStr = Field(
        default=SecretStr(""), description="Storage account access key"
    )
    local: str = Field(default="", description="Local file or directory path")


class ResolvedCredentials(BaseModel):
    """Account name and key after every credential source has been consulted."""

    model_config = ConfigDict(frozen=True)

    account_name: str = Field(..., min_length=1)
    account_key: SecretStr


class Mode(str, Enum):
    """Operation selected on the command line."""

    LIST = "list"
    GET = "get"
    PUT = "put"
    APPEND = "append"
    PUT_APPEND = "put-append"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Mode":
        """Map a mode string onto a ``Mode``.

        ``None`` selects ``LIST``; the CLI always passes a string, so this
        default only applies to library callers.
        """
        if value is None:
            return cls.LIST
        try:
            return cls(value)
        except ValueError:
            raise ArgumentError(f"Invalid mode: {value}") from None


class OperationRequest(BaseModel):
    """A single operation to perform, fixed once the arguments are parsed."""

    model_config = ConfigDict(frozen=True)

    mode: Mode = Mode.LIST
    container: Optional[str] = Field(default=None, description="Container name")
    blob: Optional[str] = Field(default=None, description="Blob name")
    local: Optional[str] = Field(default=None, description="Local path")
