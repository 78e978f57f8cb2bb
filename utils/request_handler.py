"""
Request Handler for the glossary content API

This module provides a unified HTTP request handler that supports:
- JSON GET requests against a microCMS-style REST API
- API-key authentication via request header
- Bounded retry with linear backoff for idempotent reads
- Masking of the API key in logs

Usage:
    from utils.request_handler import RequestHandler, RequestConfig

    handler = RequestHandler(config=RequestConfig(service_domain='my-glossary', api_key='...'))
    payload = handler.get_json('terms', params={'limit': 12})
"""

import requests
import time
import logging
from typing import Optional, Dict, Any
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Import masking utilities
from utils.masking import mask_headers, mask_partial


class RemoteUnavailable(Exception):
    """The content store could not be reached or answered with invalid data."""


@dataclass
class RequestConfig:
    """Configuration for request handler"""
    service_domain: str = ''
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: float = 10.0
    max_retries: int = 3
    retry_backoff: float = 1.0

    def __post_init__(self):
        if self.max_retries < 1:
            self.max_retries = 1

    @property
    def api_base_url(self) -> str:
        """Root of the REST API, e.g. ``https://my-glossary.microcms.io/api/v1``."""
        if self.base_url:
            return self.base_url.rstrip('/')
        return f"https://{self.service_domain}.microcms.io/api/v1"


class RequestHandler:
    """
    HTTP request handler for the content API.

    Only GET requests are issued, so every attempt is safe to repeat.
    Retries are bounded by ``config.max_retries``; client errors (4xx other
    than 429) fail immediately.
    """

    API_KEY_HEADER = 'X-MICROCMS-API-KEY'

    DEFAULT_HEADERS = {
        'Accept': 'application/json',
        'User-Agent': 'it-glossary/0.1',
    }

    def __init__(self, config: Optional[RequestConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize request handler.

        Args:
            config: RequestConfig instance with configuration settings
            session: Optional pre-built session (mainly for tests)
        """
        self.config = config or RequestConfig()
        self.session = session or requests.Session()

    def build_url(self, endpoint: str) -> str:
        return f"{self.config.api_base_url}/{endpoint.lstrip('/')}"

    def build_headers(self) -> Dict[str, str]:
        headers = dict(self.DEFAULT_HEADERS)
        if self.config.api_key:
            headers[self.API_KEY_HEADER] = self.config.api_key
        return headers

    @staticmethod
    def is_retryable_status(status_code: int) -> bool:
        """5xx and 429 are worth another attempt; other client errors are not."""
        return status_code == 429 or status_code >= 500

    def _do_request(self, url: str, params: Optional[Dict[str, Any]], headers: Dict[str, str],
                    context_msg: str) -> requests.Response:
        """Execute a single HTTP request."""
        logger.debug(f"[{context_msg}] Requesting: {url} params={params}")
        logger.debug(f"[{context_msg}] Headers: {mask_headers(headers)}")
        response = self.session.get(url, params=params, headers=headers, timeout=self.config.timeout)
        logger.debug(f"[{context_msg}] Response: HTTP {response.status_code}, Content-Length: {len(response.content)} bytes")
        return response

    def get_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Fetch *endpoint* and decode the JSON body.

        Args:
            endpoint: Path below the API root (e.g. ``'terms'``)
            params: Query parameters

        Returns:
            Decoded JSON payload

        Raises:
            RemoteUnavailable: the store is unreachable after all retries,
                answered with an error status, or returned non-JSON.
        """
        url = self.build_url(endpoint)
        headers = self.build_headers()
        context_msg = f"{mask_partial(self.config.service_domain)}/{endpoint}"
        max_retries = self.config.max_retries
        last_error: Optional[str] = None

        for attempt in range(1, max_retries + 1):
            logger.debug(f"[{context_msg}] attempt {attempt}/{max_retries}")
            try:
                response = self._do_request(url, params, headers, context_msg)
            except requests.RequestException as e:
                last_error = f"{type(e).__name__}: {e}"
                logger.warning(f"[{context_msg}] Request failed: {last_error}")
            else:
                if response.ok:
                    try:
                        return response.json()
                    except ValueError as e:
                        raise RemoteUnavailable(f"Invalid JSON from {endpoint}: {e}") from e

                last_error = f"HTTP {response.status_code}"
                if not self.is_retryable_status(response.status_code):
                    logger.error(f"[{context_msg}] {last_error}, not retrying")
                    raise RemoteUnavailable(f"{endpoint} returned {last_error}")
                logger.warning(f"[{context_msg}] {last_error}")

            if attempt < max_retries:
                delay = self.config.retry_backoff * attempt
                logger.info(f"[{context_msg}] Retrying in {delay:.1f}s...")
                time.sleep(delay)

        logger.error(f"[{context_msg}] Giving up after {max_retries} attempts ({last_error})")
        raise RemoteUnavailable(f"{endpoint} unavailable after {max_retries} attempts: {last_error}")


def create_request_handler_from_config(**config_kwargs) -> RequestHandler:
    """
    Create a RequestHandler instance from ``config.py`` settings.

    Values missing from ``config.py`` (or the whole file) fall back to the
    RequestConfig defaults; explicit keyword arguments win over both.

    Returns:
        Configured RequestHandler instance
    """
    settings = {}
    try:
        import config
        for key, attr in (
            ('service_domain', 'CMS_SERVICE_DOMAIN'),
            ('api_key', 'CMS_API_KEY'),
            ('base_url', 'CMS_BASE_URL'),
            ('timeout', 'REQUEST_TIMEOUT'),
            ('max_retries', 'REQUEST_MAX_RETRIES'),
            ('retry_backoff', 'REQUEST_RETRY_BACKOFF'),
        ):
            if hasattr(config, attr):
                settings[key] = getattr(config, attr)
    except ImportError:
        logger.debug("config.py not found, using default request settings")
    settings.update(config_kwargs)
    return RequestHandler(config=RequestConfig(**settings))
