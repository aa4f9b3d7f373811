"""REST API client for CoinsPaid."""

import asyncio
import json
from urllib.parse import urljoin, urlsplit

import aiohttp

from ..models.address import Address, TakeAddressInput
from ..models.withdrawal import WithdrawCryptoInput, WithdrawCryptoPayload
from ..utils.config import Config
from ..utils.logger import logger
from .auth import get_auth_headers, sign
from .exceptions import (
    ClientConfigError,
    EncodingError,
    ProtocolError,
    ResponseError,
    TransportError,
)
from .response import classify_response


class CoinspaidClient:
    """Async REST client for the CoinsPaid processing API.

    A client holds only read-only credentials, the base endpoint and one pooled
    aiohttp session, so it can be shared by concurrent tasks.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_endpoint: str,
        timeout: float = Config.REST_TIMEOUT,
    ):
        if not api_key or not api_secret or not base_endpoint:
            raise ClientConfigError(
                "api_key, api_secret and base_endpoint are required to create a client"
            )

        try:
            parts = urlsplit(base_endpoint)
            # urlsplit only validates the port when it is read
            port = parts.port
        except ValueError as e:
            raise ClientConfigError(f"can't parse base endpoint: {base_endpoint!r}") from e
        if parts.scheme not in ("http", "https") or not parts.hostname or port == 0:
            raise ClientConfigError(f"can't parse base endpoint: {base_endpoint!r}")

        self._api_key = api_key
        self._api_secret = api_secret
        # Relative paths resolve under the endpoint, not beside its last segment
        self.base_url = base_endpoint if base_endpoint.endswith("/") else base_endpoint + "/"
        self.timeout = timeout
        self.session: aiohttp.ClientSession | None = None

    @classmethod
    def from_config(cls) -> "CoinspaidClient":
        """Create a client from environment configuration."""
        return cls(
            api_key=Config.API_KEY,
            api_secret=Config.API_SECRET,
            base_endpoint=Config.get_rest_url(),
            timeout=Config.REST_TIMEOUT,
        )

    def __repr__(self) -> str:
        return f"CoinspaidClient(base_url={self.base_url!r}, timeout={self.timeout})"

    async def __aenter__(self):
        """Context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create aiohttp session."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self.session = aiohttp.ClientSession(timeout=timeout)
            logger.info(f"REST client connected to {self.base_url}")

    async def close(self) -> None:
        """Close aiohttp session."""
        if self.session and not self.session.closed:
            await self.session.close()
            logger.info("REST client closed")

    def _encode(self, request_input) -> bytes:
        try:
            return json.dumps(request_input.to_api_payload()).encode("utf-8")
        except (TypeError, ValueError, ArithmeticError) as e:
            raise EncodingError(f"can't encode {type(request_input).__name__}: {e}") from e

    async def _post(self, path: str, request_input, model):
        """
        Make a signed POST request and decode its response into ``model``.

        Args:
            path: API path relative to the base URL
            request_input: Request input exposing ``to_api_payload()``
            model: Output type exposing ``from_api(data)``

        Returns:
            ``model`` instance built from the response ``data`` envelope

        Raises:
            EncodingError: Input can't be serialized
            TransportError: On network failure or timeout
            ResponseError: On any non-success or malformed response
        """
        body = self._encode(request_input)

        await self.connect()

        url = urljoin(self.base_url, path)
        # The signed bytes are the transmitted bytes
        headers = get_auth_headers(self._api_key, sign(self._api_secret, body))

        logger.debug(f"REST request -> POST {url} body: {body.decode('utf-8')}")

        try:
            async with self.session.post(url, data=body, headers=headers) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"REST request failed: POST {url} - {e!r}")
            raise TransportError(f"POST {url} failed: {e!r}") from e

        text = raw.decode("utf-8", errors="replace")
        try:
            data = classify_response(status, text, method="POST", url=url)
        except ResponseError as e:
            logger.error(f"REST API error: {e}")
            raise

        try:
            return model.from_api(data)
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.error(f"Failed to decode {model.__name__}: {e!r} - {text}")
            raise ProtocolError(
                f"unexpected {model.__name__} shape: {e!r}",
                status=status,
                method="POST",
                url=url,
                body=text,
            ) from e

    async def take_address(self, address_input: TakeAddressInput) -> Address:
        """
        Take a deposit address.

        Args:
            address_input: Foreign ID and currency of the address

        Returns:
            Address assigned by the server
        """
        address = await self._post("addresses/take", address_input, Address)
        logger.info(
            f"Address taken: {address.currency} {address.address} - foreign_id: {address.foreign_id}"
        )
        return address

    async def withdraw_crypto(self, withdrawal_input: WithdrawCryptoInput) -> WithdrawCryptoPayload:
        """
        Withdraw crypto to the given address.

        Args:
            withdrawal_input: Withdrawal parameters

        Returns:
            Withdrawal accepted by the server
        """
        withdrawal = await self._post("withdrawal/crypto", withdrawal_input, WithdrawCryptoPayload)
        logger.info(
            f"Withdrawal {withdrawal.status}: {withdrawal.amount} {withdrawal.sender_currency} - ID: {withdrawal.id}"
        )
        return withdrawal
