"""Resolve the effective configuration from file, flags and environment.

Precedence is evaluated independently for every field:

    command-line flag > config file > environment variable

Only the account name and the master key fall back to the environment
(``STORAGE_ACCOUNT`` / ``STORAGE_MASTER_KEY``); the local path does not.
"""

from pathlib import Path
from typing import Optional, Union

from pydantic import SecretStr
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings

from azure_storage_cli.core import get_logger
from azure_storage_cli.core.exceptions import ConfigurationError
from azure_storage_cli.schemas import ResolvedCredentials, StorageConfig

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "azure-storage.json"


class CredentialEnvironment(BaseSettings):
    """Credential fallback read from the process environment."""

    storage_account: str = ""
    storage_master_key: SecretStr = SecretStr("")

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
    }


def load_config_file(path: Union[str, Path]) -> StorageConfig:
    """Load the JSON config file, or return defaults if it cannot be opened.

    Raises:
        ConfigurationError: If the file exists but is not a valid config
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        logger.debug("Config file not loaded", path=str(path), reason=str(e))
        return StorageConfig()

    try:
        config = StorageConfig.model_validate_json(raw)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Failed to parse config file '{path}': {e}") from e

    logger.debug("Config file loaded", path=str(path))
    return config


def merge_cli_overrides(
    config: StorageConfig,
    storage_account: Optional[str] = None,
    storage_master_key: Optional[str] = None,
    local: Optional[str] = None,
) -> StorageConfig:
    """Overwrite config fields with every command-line value that was given."""
    updates: dict = {}
    if storage_account is not None:
        updates["storage_account"] = storage_account
    if storage_master_key is not None:
        updates["storage_master_key"] = SecretStr(storage_master_key)
    if local is not None:
        updates["local"] = local
    return config.model_copy(update=updates)


def resolve_configuration(
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    storage_account: Optional[str] = None,
    storage_master_key: Optional[str] = None,
    local: Optional[str] = None,
) -> StorageConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config_file(config_path)
    return merge_cli_overrides(
        config,
        storage_account=storage_account,
        storage_master_key=storage_master_key,
        local=local,
    )


def resolve_credentials(config: StorageConfig) -> ResolvedCredentials:
    """Fill an unset account name or key from the environment.

    Raises:
        ConfigurationError: If a value is set nowhere
    """
    account = config.storage_account
    key = config.storage_master_key.get_secret_value()

    if not account or not key:
        env = CredentialEnvironment()
        if not account:
            account = env.storage_account
            if not account:
                raise ConfigurationError("STORAGE_ACCOUNT is not defined")
            logger.debug("Storage account taken from environment")
        if not key:
            key = env.storage_master_key.get_secret_value()
            if not key:
                raise ConfigurationError("STORAGE_MASTER_KEY is not defined")
            logger.debug("Storage master key taken from environment")

    return ResolvedCredentials(account_name=account, account_key=SecretStr(key))


def local_path_of(config: StorageConfig) -> Optional[str]:
    """Return the configured local path; an empty string means not provided."""
    return config.local or None
