# seo_checker/base_module.py
import logging
from abc import ABC, abstractmethod

import requests
from bs4 import UnicodeDammit

from .errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "SEO-Checker/1.0"
DEFAULT_TIMEOUT = 10

_TEXT_TYPE_MARKERS = ("xml", "json", "javascript")


class SEOModule(ABC):
    """
    Abstract base class for the checker modules.
    Holds the module config and the HTTP session used to retrieve markup.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})

        user_agent = self.global_config.get("user_agent", DEFAULT_USER_AGENT)
        accept_lang = self.global_config.get("accept_language", "en-US,en;q=0.8")
        self.headers = {
            'User-Agent': user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': accept_lang,
        }
        self.timeout = self.global_config.get("request_timeout", DEFAULT_TIMEOUT)

        # One attempt per request: no retry adapter is mounted.
        self.session = requests.Session()
        self.session.headers.update(self.headers)

    @abstractmethod
    def analyze(self, url: str):
        """
        Analyzes the given URL.

        Args:
            url (str): The URL to analyze.
        """

    def fetch_markup(self, url: str) -> str:
        """
        Fetches the markup of a URL as text.

        Args:
            url (str): The URL to fetch.

        Returns:
            str: The decoded response body.

        Raises:
            FetchError: on timeout, network error or a non-text body.
        """
        logger.info("Fetching %s (timeout=%ss)", url, self.timeout)
        try:
            resp = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.Timeout as e:
            logger.warning("Timed out fetching %s in %s: %s", url, self.module_name, e)
            raise FetchError(f"Request timed out after {self.timeout}s: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.warning("Error fetching %s in %s: %s", url, self.module_name, e)
            raise FetchError(str(e) or FetchError.default_message) from e

        logger.debug("Fetched %s: HTTP %s, %d bytes", url, resp.status_code, len(resp.content or b""))

        content_type = (resp.headers.get("Content-Type") or "").lower()
        if content_type and not is_text_content_type(content_type):
            raise FetchError(f"Non-text response from {url} (content-type: {content_type})")

        # Only a charset sent in the Content-Type header is used as a hint.
        declared = resp.encoding if "charset=" in content_type else None
        return decode_body(resp.content, declared)


def is_text_content_type(content_type: str) -> bool:
    mime = content_type.split(";", 1)[0].strip().lower()
    if mime.startswith("text/"):
        return True
    return any(marker in mime for marker in _TEXT_TYPE_MARKERS)


def decode_body(content: bytes, declared_encoding: str | None = None) -> str:
    if not content:
        return ""
    # Tried in order: BOM, <meta> charset, the header charset, detection.
    user_encodings = [declared_encoding] if declared_encoding else None
    dammit = UnicodeDammit(content, is_html=True, user_encodings=user_encodings)
    if dammit.unicode_markup is None:
        raise FetchError("Could not decode response body as text")
    return dammit.unicode_markup
