import re

from .title_meta import get_meta_content

_CANONICAL_RE = re.compile(r'<link[^>]*rel=["\']canonical["\'][^>]*href=["\']([^"\']*)["\']', re.I)
_CHARSET_RE = re.compile(r'<meta[^>]*charset=["\']?([^"\'\s>]+)', re.I)


def extract_canonical(markup: str) -> str:
    match = _CANONICAL_RE.search(markup or "")
    return match.group(1) if match else ""


def extract_charset(markup: str) -> str:
    # Matches both <meta charset="..."> and the http-equiv Content-Type form.
    match = _CHARSET_RE.search(markup or "")
    return match.group(1) if match else ""


def extract_viewport(markup: str) -> str:
    return get_meta_content(markup, "viewport")


def extract_robots(markup: str) -> str:
    return get_meta_content(markup, "robots")
