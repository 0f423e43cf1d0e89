"""npm registry document fetching."""

import asyncio
import logging

import httpx

from .errors import PackageNotFound, RegistryError
from .models import NormalizedPackageRecord
from .parse_node import parse_package_json

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"


class NpmRegistryClient:
    """Client for fetching full registry documents."""

    def __init__(
        self,
        registry_url: str = DEFAULT_REGISTRY_URL,
        timeout: float = 30.0,
        max_concurrency: int = 6,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize registry client.

        Args:
            registry_url: Base URL of the registry API
            timeout: Request timeout in seconds
            max_concurrency: Maximum concurrent requests
            transport: Optional httpx transport, mainly for tests
        """
        self.registry_url = registry_url.rstrip("/")
        self.timeout = timeout
        self.max_concurrency = max_concurrency
        self.transport = transport
        self._cache: dict[str, str] = {}
        self._semaphore = asyncio.Semaphore(max_concurrency)

    def document_url(self, package_name: str) -> str:
        """Registry URL of a package document; scoped names keep "@" and encode "/"."""
        return f"{self.registry_url}/{package_name.replace('/', '%2F')}"

    async def fetch_document(self, package_name: str) -> str | None:
        """Fetch the raw registry document for a package.

        Args:
            package_name: Name of the package

        Returns:
            Document text, or None if the package does not exist
        """
        if package_name in self._cache:
            logger.debug("Cache hit for %s", package_name)
            return self._cache[package_name]

        url = self.document_url(package_name)
        logger.debug("Fetching %s", url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
                if response.status_code == 404:
                    return None
                response.raise_for_status()

                self._cache[package_name] = response.text
                return response.text

        except httpx.TimeoutException as e:
            logger.warning("Timeout fetching %s", package_name)
            raise RegistryError(f"Timeout fetching metadata for {package_name}", package=package_name, cause=e) from e
        except httpx.HTTPStatusError as e:
            logger.warning("HTTP %s fetching %s", e.response.status_code, package_name)
            raise RegistryError(f"HTTP error fetching {package_name}: {e}", package=package_name, cause=e) from e
        except httpx.HTTPError as e:
            logger.warning("Network error fetching %s: %s", package_name, e)
            raise RegistryError(f"Network error fetching {package_name}: {e}", package=package_name, cause=e) from e

    async def fetch_record(self, package_name: str) -> NormalizedPackageRecord:
        """Fetch and normalize the registry document of a package.

        Raises:
            PackageNotFound: If the registry has no such package
            RegistryError: If the registry request fails
            InvalidFormat: If the registry answered with something other than JSON
            InvalidPackageMetadata: If the document cannot be normalized
        """
        async with self._semaphore:
            content = await self.fetch_document(package_name)
        if content is None:
            raise PackageNotFound(f"Package {package_name} not found", package=package_name)
        return parse_package_json(content)

    async def fetch_records(self, package_names: list[str]) -> list[NormalizedPackageRecord]:
        """Fetch and normalize several packages concurrently."""
        tasks = [self.fetch_record(name) for name in package_names]
        return await asyncio.gather(*tasks)
