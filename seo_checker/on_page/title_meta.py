import re

_META_NAME_FIRST = r'<meta[^>]*(?:name|property)=["\']{name}["\'][^>]*content=["\']([^"\']*)["\']'
_META_CONTENT_FIRST = r'<meta[^>]*content=["\']([^"\']*)["\'][^>]*(?:name|property)=["\']{name}["\']'

_TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.I | re.S)


def get_meta_content(markup: str, name: str) -> str:
    """
    Returns the ``content`` of the first meta tag whose ``name`` or ``property``
    equals `name` (case-insensitive), or "" when there is none.

    Both attribute orders are accepted: name/property before content is tried
    over the whole document first, then content before name/property. The value
    is returned raw, without entity decoding.
    """
    if not markup or not name:
        return ""
    escaped = re.escape(name)
    for template in (_META_NAME_FIRST, _META_CONTENT_FIRST):
        match = re.search(template.format(name=escaped), markup, re.I)
        if match:
            return match.group(1)
    return ""


def extract_title(markup: str) -> str:
    match = _TITLE_RE.search(markup or "")
    return match.group(1).strip() if match else ""


def extract_meta_description(markup: str) -> str:
    return get_meta_content(markup, "description")
