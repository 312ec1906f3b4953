"""HTTP client for communicating with the decipher service."""

import logging
from typing import Optional
import httpx
from shared.config.config import config
from shared.domain.models import DecipherRequest, DecipherResponse, StatsResponse
from shared.domain.consts import ResultStatus

logger = logging.getLogger(__name__)


class DecipherClient:
    """
    HTTP client for a remote decipher service.
    
    Network and protocol failures never raise out of the client: they are
    logged and reported as an ERROR response (or None for the count).
    """
    
    def __init__(self, base_url: str, timeout: Optional[float] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else config.DECIPHER_REQUEST_TIMEOUT,
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=10)
        )
    
    async def decipher(self, text: str) -> DecipherResponse:
        """
        Send text to the service for deciphering.
        
        Returns:
            DecipherResponse from the service, or an ERROR response on failure.
        """
        payload = DecipherRequest.model_construct(text=text)
        
        try:
            logger.debug(f"Sending {len(text)} characters to {self.base_url}/decipher")
            
            response = await self.client.post(
                f"{self.base_url}/decipher",
                json=payload.model_dump()
            )
            response.raise_for_status()
            
            result = DecipherResponse.model_validate(response.json())
            
            logger.debug(
                f"Decipher request to {self.base_url} completed with status {result.status} "
                f"({result.resolved}/{result.records} lines resolved)"
            )
            
            return result
        
        except httpx.HTTPError as e:
            logger.error(f"HTTP error communicating with {self.base_url}: {e}")
            return DecipherResponse(
                status=ResultStatus.ERROR,
                result=None,
                error_message=f"HTTP error: {str(e)}",
            )
        except Exception as e:
            logger.error(
                f"Unexpected error communicating with {self.base_url}: {e}",
                exc_info=True,
            )
            return DecipherResponse(
                status=ResultStatus.ERROR,
                result=None,
                error_message=f"Unexpected error: {str(e)}",
            )
    
    async def get_password_count(self) -> Optional[int]:
        """
        Ask the service how many passwords it knows.
        
        Returns:
            The count, or None if the service could not be reached.
        """
        try:
            response = await self.client.get(f"{self.base_url}/stats")
            response.raise_for_status()
            return StatsResponse.model_validate(response.json()).password_count
        except Exception as e:
            logger.error(f"Failed to fetch stats from {self.base_url}: {e}")
            return None
    
    async def close(self) -> None:
        """
        Close HTTP client and cleanup resources.
        
        Should be called when done with the client to properly close connections.
        """
        await self.client.aclose()
