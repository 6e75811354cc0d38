from abc import ABC, abstractmethod

import httpx
import structlog

from gptrust.config import Settings, settings
from gptrust.core.exceptions import TransportError

logger = structlog.get_logger()


class Transport(ABC):
    @abstractmethod
    async def send(self, endpoint_name: str, body: str) -> str:
        """POST a serialized body to a named endpoint and return the raw response body."""
        ...


class HttpTransport(Transport):
    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        api_key: str | None = None,
        connect_timeout: float = 5.0,
        read_timeout: float = 120.0,
    ):
        self.base_url = base_url.rstrip("/")
        self._headers = {"Content-Type": "application/json"}
        if api_key:
            self._headers["Authorization"] = f"Bearer {api_key}"
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(connect=connect_timeout, read=read_timeout, write=5.0, pool=5.0)
        )

    @classmethod
    def from_settings(cls, config: Settings = settings, http_client: httpx.AsyncClient | None = None) -> "HttpTransport":
        return cls(
            base_url=config.gptrust_base_url,
            http_client=http_client,
            api_key=config.gptrust_api_key,
            connect_timeout=config.gptrust_http_connect_timeout,
            read_timeout=config.gptrust_http_read_timeout,
        )

    async def send(self, endpoint_name: str, body: str) -> str:
        url = f"{self.base_url}/{endpoint_name}"

        try:
            response = await self._client.post(url, content=body, headers=self._headers)
            response.raise_for_status()
        except httpx.ConnectError as e:
            logger.warning("completion_service_unreachable", url=url, error=str(e))
            raise TransportError(f"Cannot connect to completion service at {self.base_url}: {e}")
        except httpx.TimeoutException:
            logger.warning("completion_service_timeout", url=url)
            raise TransportError("Completion service request timed out.")
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            service_message = _service_error_message(e.response)
            logger.warning("completion_service_error", url=url, status=status, message=service_message)
            raise TransportError(
                f"Completion service returned error: {status}",
                status=status,
                details={"service_message": service_message},
            )
        except httpx.RequestError as e:
            logger.warning("completion_service_request_failed", url=url, error=str(e))
            raise TransportError(f"Request to completion service failed: {e}")

        return response.text

    async def close(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def _service_error_message(response: httpx.Response) -> str:
    """Pull `error.message` out of an OpenAI-style error body, else the raw text."""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.text[:500]
