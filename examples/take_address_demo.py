"""Take a deposit address on the CoinsPaid sandbox."""

import asyncio
import sys

from coinspaid import (
    APIError,
    CoinspaidClient,
    Config,
    TakeAddressInput,
    TransportError,
    ValidationError,
)
from coinspaid.utils.logger import logger


async def take_address(foreign_id: str, currency: str) -> None:
    """Take one address and log the result."""
    logger.info("=" * 70)
    logger.info("CoinsPaid Sandbox - Take Address")
    logger.info("=" * 70)

    if not Config.is_sandbox():
        logger.error("This script only works on the sandbox!")
        logger.error("Set COINSPAID_ENVIRONMENT=sandbox in your .env file")
        return

    if not Config.validate():
        logger.error(
            "API credentials not found!\n"
            "Please set COINSPAID_API_KEY and COINSPAID_API_SECRET in .env file"
        )
        return

    logger.info(f"REST URL: {Config.get_rest_url()}")

    async with CoinspaidClient.from_config() as client:
        try:
            address = await client.take_address(
                TakeAddressInput(foreign_id=foreign_id, currency=currency)
            )
        except ValidationError as e:
            for field, message in e.errors.items():
                logger.error(f"  {field}: {message}")
            return
        except (APIError, TransportError) as e:
            logger.error(f"Request failed: {e}")
            return

    logger.info(f"Address: {address.address}")
    if address.tag:
        logger.info(f"Tag: {address.tag}")


if __name__ == "__main__":
    foreign_id = sys.argv[1] if len(sys.argv) > 1 else "user-id:2048"
    currency = sys.argv[2] if len(sys.argv) > 2 else "BTC"
    asyncio.run(take_address(foreign_id, currency))
