"""HTTP client for communicating with the listing server."""

import time
import uuid
from typing import Optional
from urllib.parse import quote

import httpx

from common.logging_config import get_logger
from cli.config import Config
from cli.utils import format_entries

logger = get_logger(__name__)


class ServerClient:
    """HTTP client for the listing API with retry logic and error handling."""

    def __init__(self, config: Config):
        """
        Initialize server client.

        Args:
            config: Configuration instance
        """
        self.config = config
        self.session = httpx.Client(
            base_url=config.get_base_url(),
            timeout=config.get_timeout()
        )
        self.request_id = None
        logger.info(f"Initialized ServerClient [base_url={config.get_base_url()}]")

    def _request_with_retry(
        self,
        method: str,
        endpoint: str,
        max_retries: Optional[int] = None,
        **kwargs
    ) -> httpx.Response:
        """
        Make HTTP request with retry logic on 5xx errors and network failures.

        Args:
            method: HTTP method
            endpoint: API endpoint path
            max_retries: Max retry attempts (uses config default if None)
            **kwargs: Additional arguments to pass to httpx request

        Returns:
            HTTP response object

        Raises:
            ConnectionError: If max retries exceeded or connection fails
        """
        retry_config = self.config.get_retry_config()
        max_retries = max_retries if max_retries is not None else retry_config['max_retries']
        backoff = retry_config['retry_backoff_multiplier']

        last_exception = None

        self.request_id = str(uuid.uuid4())
        kwargs.setdefault('headers', {})['X-Request-ID'] = self.request_id

        logger.debug(
            f"Making request: {method} {endpoint} [request_id={self.request_id}]"
        )

        for attempt in range(max_retries + 1):
            try:
                response = self.session.request(method, endpoint, **kwargs)

                logger.debug(
                    f"Response received: {method} {endpoint} status={response.status_code} [request_id={self.request_id}]"
                )

                if 400 <= response.status_code < 500:
                    logger.warning(
                        f"Client error: {method} {endpoint} status={response.status_code} [request_id={self.request_id}]"
                    )
                    return response

                if response.status_code >= 500 and attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Server error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {endpoint} status={response.status_code}, retrying in {delay}s [request_id={self.request_id}]"
                    )
                    time.sleep(delay)
                    continue

                return response

            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                if attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Network error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {endpoint} error={type(e).__name__}, retrying in {delay}s [request_id={self.request_id}]"
                    )
                    time.sleep(delay)
                    continue
                logger.error(
                    f"Network error (max retries exceeded): {method} {endpoint} error={e} [request_id={self.request_id}]"
                )

        if isinstance(last_exception, httpx.TimeoutException):
            raise ConnectionError("Request timed out. Server may be overloaded.")
        raise ConnectionError("Cannot connect to listing server. Is it running?")

    def _format_error(self, response: httpx.Response) -> str:
        """
        Map HTTP errors to user-friendly messages.

        Args:
            response: HTTP response object

        Returns:
            User-friendly error message
        """
        try:
            error_data = response.json()
            detail = error_data.get('detail', 'Unknown error')
            code = error_data.get('code', 'UNKNOWN')
        except ValueError:
            detail = response.text if response.text else 'Unknown error'
            code = 'UNKNOWN'

        error_messages = {
            'REGISTRY_NAME_NOT_FOUND': 'No directory is registered under that name (names are case sensitive).',
            'PATH_NOT_FOUND': 'Directory does not exist on the server.',
            'NOT_A_DIRECTORY': 'Path exists on the server but is not a directory.',
            'ENUMERATION_IO_ERROR': 'The server could not read the directory.',
        }

        if code in error_messages:
            return f"{error_messages[code]} ({detail})"

        status_messages = {
            400: 'Bad request',
            404: 'Not found',
            422: 'Invalid request',
            500: 'Server error',
            503: 'Service unavailable',
        }

        message = status_messages.get(response.status_code, detail)
        return f"{message} (Code: {code})" if code != 'UNKNOWN' else message

    def _list(self, endpoint: str, label: str, **kwargs) -> str:
        try:
            response = self._request_with_retry('GET', endpoint, **kwargs)

            if response.status_code == 200:
                entries = response.json()['entries']
                logger.info(f"Listed {len(entries)} entries for {label}")
                return format_entries(entries)

            logger.warning(f"Listing failed for {label} status={response.status_code}")
            return f"Listing failed: {self._format_error(response)}"

        except ConnectionError as e:
            logger.error(f"Connection error during listing: {e}")
            return f"Error: {e}"

    def list_by_name(self, name: str) -> str:
        """
        List the entries of a registry-named directory.

        Args:
            name: Logical directory name

        Returns:
            Formatted listing or error message
        """
        logger.info(f"Listing directory by name: {name}")
        return self._list(f"/directories/{quote(name, safe='/')}/entries", f"name={name}")

    def list_by_path(self, path: str) -> str:
        """
        List the entries of a directory given by server-side path.

        Args:
            path: Filesystem path on the server

        Returns:
            Formatted listing or error message
        """
        logger.info(f"Listing directory by path: {path}")
        return self._list('/entries', f"path={path}", params={'path': path})

    def fetch_directories(self) -> list[dict]:
        """
        Fetch registered directories.

        Returns:
            List of {'name', 'path'} dicts

        Raises:
            ConnectionError: If the server is unreachable
            httpx.HTTPStatusError: If the server answers with an error
        """
        response = self._request_with_retry('GET', '/directories')
        response.raise_for_status()
        return response.json()['directories']

    def list_directories(self) -> str:
        """
        Show registered directory names and paths.

        Returns:
            Formatted registry table or error message
        """
        try:
            directories = self.fetch_directories()
        except ConnectionError as e:
            logger.error(f"Connection error while fetching directories: {e}")
            return f"Error: {e}"
        except httpx.HTTPStatusError as e:
            return f"Error: {self._format_error(e.response)}"

        if not directories:
            return "No directories registered."
        width = max(len(d['name']) for d in directories)
        return '\n'.join(f"{d['name']:<{width}}  {d['path']}" for d in directories)

    def registered_names(self) -> list[str]:
        """
        Registered names for completion; empty when the server is unavailable.
        """
        try:
            return [d['name'] for d in self.fetch_directories()]
        except (ConnectionError, httpx.HTTPError) as e:
            logger.debug(f"Could not fetch registered names: {e}")
            return []
