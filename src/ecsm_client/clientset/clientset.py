"""Entry point bundling every resource client over one REST client."""

import httpx
import structlog

from ..rest import DEFAULT_API_PREFIX, DEFAULT_TIMEOUT, RESTClient, build_base_url
from ..settings import ClientConfig, configure_logging
from .config import ConfigClient
from .container import ContainerClient
from .micro_service import MicroServiceClient
from .node import NodeClient
from .record import RecordClient
from .service import ServiceClient
from .template import TemplateClient

logger = structlog.get_logger(__name__)


class Clientset:
    """Access to every ECSM resource family.

    Resource clients are built on demand and hold no state of their own, so
    they may be used from several threads at once.

    Each thread gets its own ``httpx.Client``. :meth:`close` closes only the
    calling thread's client; worker threads must call it themselves before
    exiting, or their connections stay open until garbage collection.
    """

    def __init__(self, rest_client: RESTClient):
        self._rest = rest_client

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "Clientset":
        """Configure logging from ``config`` and connect to its server."""
        configure_logging(config.log_level, config.log_format)
        rest_client = RESTClient(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )
        logger.info("Created shared REST client", base_url=rest_client.base_url)
        return cls(rest_client)

    @property
    def rest_client(self) -> RESTClient:
        return self._rest

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self._rest.close()

    def services(self) -> ServiceClient:
        return ServiceClient(self._rest)

    def micro_services(self) -> MicroServiceClient:
        return MicroServiceClient(self._rest)

    def records(self) -> RecordClient:
        return RecordClient(self._rest)

    def containers(self) -> ContainerClient:
        return ContainerClient(self._rest)

    def nodes(self) -> NodeClient:
        return NodeClient(self._rest)

    def configs(self) -> ConfigClient:
        return ConfigClient(self._rest)

    def templates(self) -> TemplateClient:
        return TemplateClient(self._rest)


def new_clientset(
    protocol: str,
    host: str,
    port: str | int,
    api_prefix: str = DEFAULT_API_PREFIX,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> Clientset:
    """Create a :class:`Clientset` for ``protocol://host:port``."""
    rest_client = RESTClient(
        base_url=build_base_url(protocol, host, port, api_prefix),
        timeout=timeout,
        transport=transport,
    )
    return Clientset(rest_client)
