"""
Key-value store backed by the sync API: GET/POST /api/kv/<key> with {"value": ...}.
Writes are fire-and-forget; failed reads count as a miss so the caller starts empty.
"""
import logging
from urllib.parse import quote

from ..api_client import APIError, api_request_with_retry
from .persistence import KeyValueStore

logger = logging.getLogger(__name__)


class ApiKeyValueStore(KeyValueStore):

    def __init__(self, api_base: str, *, timeout: int = 15, max_retries: int = 2):
        self.api_base = api_base
        self.timeout = timeout
        self.max_retries = max_retries

    def _path(self, key: str) -> str:
        return f"/api/kv/{quote(key, safe='')}"

    def get(self, key: str) -> str | None:
        try:
            data = api_request_with_retry(
                self.api_base, "GET", self._path(key),
                timeout=self.timeout, max_retries=self.max_retries,
            )
        except APIError as e:
            if e.status_code == 404:
                return None
            logger.warning("GET %s failed (status=%s): %s; treating as empty", key, e.status_code, e)
            return None
        value = data.get("value")
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            api_request_with_retry(
                self.api_base, "POST", self._path(key), data={"value": value},
                timeout=self.timeout, max_retries=self.max_retries,
            )
        except APIError as e:
            logger.warning("POST %s failed (status=%s): %s; write dropped", key, e.status_code, e)
