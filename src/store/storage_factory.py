"""Backend selection from runtime configuration."""

from __future__ import annotations

from core.config import BoostBoxConfig
from core.errors import BoostBoxConfigError
from core.logging_config import get_logger
from store.document_storage import DocumentStorage
from store.local_storage import LocalStorage
from store.s3_storage import S3Storage

_LOGGER = get_logger(__name__)


def make_storage(config: BoostBoxConfig) -> DocumentStorage:
    """Build the configured storage backend.

    Args:
        config: Runtime configuration.

    Returns:
        Filesystem or object-store backend.

    Raises:
        BoostBoxConfigError: If S3 is selected without S3 settings.
    """
    if config.storage == "S3":
        if config.s3 is None:
            raise BoostBoxConfigError(
                "BB_STORAGE=S3 requires BB_S3_* settings. Build config with from_env()."
            )
        _LOGGER.info("storage_selected", storage="S3", bucket=config.s3.bucket)
        return S3Storage.from_settings(config.s3)
    _LOGGER.info("storage_selected", storage="FS", root_path=str(config.root_path))
    return LocalStorage(config.root_path)
