"""Example usage of the async registry client with token authentication."""

import asyncio
import logging
import os

from registry_v2_client import (
    NotFoundError,
    RegistryAuthError,
    RegistryClient,
    RegistryError,
)

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

REGISTRY_HOST = os.getenv("REGISTRY_HOST", "localhost:15000")
USERNAME = os.getenv("REGISTRY_USERNAME")
PASSWORD = os.getenv("REGISTRY_PASSWORD")


async def main():
    """Example async operations."""
    async with RegistryClient(
        REGISTRY_HOST, username=USERNAME, password=PASSWORD
    ) as client:
        try:
            # Check connectivity
            logger.info("Checking registry connectivity...")
            if not await client.check_connectivity():
                logger.error(f"Registry at {REGISTRY_HOST} is not reachable")
                return

            # List repositories with their tags
            logger.info("Listing catalog...")
            catalog = await client.catalog()
            for entry in catalog:
                logger.info(f"  {entry['name']}: {entry['tags']}")

            # Fetch the manifest of the first tagged image
            for entry in catalog:
                if entry["tags"]:
                    manifest = await client.manifest(entry["name"], entry["tags"][0])
                    logger.info(f"Manifest keys: {sorted(manifest)}")
                    break

        except RegistryAuthError as e:
            logger.error(f"Authentication failed: {e}")
        except NotFoundError as e:
            logger.error(f"Not found: {e}")
        except RegistryError as e:
            logger.error(f"Registry error: {e}")


if __name__ == "__main__":
    asyncio.run(main())
