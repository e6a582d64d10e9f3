"""IPFS upload service."""
import logging

from ..config import TatumConfig
from ..interfaces.connector import Connector
from ..registry import CollaboratorKind, ScopedRegistry
from ..response import ResponseDto, try_fail

logger = logging.getLogger(__name__)


class Ipfs:
    """Store files on IPFS through the Tatum gateway."""

    def __init__(self, instance_id: str, registry: ScopedRegistry) -> None:
        self.id = instance_id
        self._config: TatumConfig = registry.resolve(instance_id, CollaboratorKind.CONFIG)
        self._connector: Connector = registry.resolve(instance_id, CollaboratorKind.CONNECTOR)

    async def upload_file(self, file: bytes) -> ResponseDto[dict[str, str]]:
        """Upload ``file`` and return ``{"ipfsHash": ...}``."""
        logger.debug("Uploading %d bytes to IPFS", len(file))
        return await try_fail(
            lambda: self._connector.upload_file(
                "ipfs", file, version=self._config.ipfs_version
            )
        )
