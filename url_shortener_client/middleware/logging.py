"""
Logging Hooks for Request/Response Logging

These hooks log every HTTP exchange the client makes. They capture:
- Request method and URL (API key redacted)
- Response status code
- Request processing time

The hooks are attached to the httpx client as event hooks, so the client
code never has to log around its own calls.
"""

import time
import logging

import httpx

logger = logging.getLogger("url_shortener_client")

REDACTED = "***"


class LoggingHooks:
    """
    httpx event hooks for logging HTTP requests and responses.

    Logs at DEBUG when a request is sent and at INFO when its response
    arrives, in the format: METHOD URL STATUS_CODE PROCESS_TIME_MS
    """

    def on_request(self, request: httpx.Request) -> None:
        request.extensions["start_time"] = time.perf_counter()
        logger.debug(f"Sending {request.method} {self._redact(request.url)}")

    def on_response(self, response: httpx.Response) -> None:
        request = response.request
        start_time = request.extensions.get("start_time")
        process_time = time.perf_counter() - start_time if start_time is not None else 0.0

        logger.info(
            f"{request.method} {self._redact(request.url)} "
            f"{response.status_code} {process_time*1000:.2f}ms"
        )

    def _redact(self, url: httpx.URL) -> str:
        """
        Render a URL for logging with the API key hidden.

        Args:
            url: Request URL

        Returns:
            URL as string
        """
        if "key" in url.params:
            url = url.copy_set_param("key", REDACTED)
        return str(url)


def add_logging_hooks(client: httpx.Client) -> httpx.Client:
    """
    Add logging hooks to an httpx client.

    Args:
        client: httpx client instance

    Returns:
        The same client
    """
    hooks = LoggingHooks()
    client.event_hooks["request"].append(hooks.on_request)
    client.event_hooks["response"].append(hooks.on_response)
    return client
