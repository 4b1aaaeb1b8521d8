"""Request builder for API requests."""
from typing import Dict, Optional


class RequestBuilder:
    """Builds API request URLs and headers."""

    def __init__(self, base_url: str, headers: Optional[Dict[str, str]] = None):
        """
        Initializes request builder.

        Args:
            base_url: API root, including its trailing '/'
            headers: Headers sent with every request against this base
        """
        self.base_url = base_url
        self.headers = dict(headers or {})

    def build_url(self, path: str) -> str:
        """
        Builds request URL.

        The path is appended verbatim: it must not start with '/'.
        """
        return f"{self.base_url}{path}"

    def build_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Builds request headers."""
        headers = dict(self.headers)
        if extra:
            headers.update(extra)
        return headers
