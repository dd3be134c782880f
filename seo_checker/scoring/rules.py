"""The fixed SEO checklist, in evaluation order."""

from dataclasses import dataclass
from typing import Callable

TITLE_MIN_LENGTH, TITLE_MAX_LENGTH = 50, 60
DESC_MIN_LENGTH, DESC_MAX_LENGTH = 150, 160


@dataclass(frozen=True)
class Rule:
    label: str
    check: Callable[[dict], bool]
    tip: Callable[[dict], str]


def _fixed(text: str) -> Callable[[dict], str]:
    return lambda fields: text


def _length_between(key: str, low: int, high: int) -> Callable[[dict], bool]:
    return lambda fields: low <= len(fields[key]) <= high


def _current_length(key: str) -> Callable[[dict], str]:
    return lambda fields: f"Current: {len(fields[key])} chars"


CHECKLIST = (
    Rule("Title tag", lambda f: bool(f["title"]), _fixed("Add a <title> tag")),
    Rule("Title length (50-60 chars)",
         _length_between("title", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH), _current_length("title")),
    Rule("Meta description", lambda f: bool(f["description"]), _fixed("Add a meta description")),
    Rule("Description length (150-160)",
         _length_between("description", DESC_MIN_LENGTH, DESC_MAX_LENGTH), _current_length("description")),
    Rule("OG Title", lambda f: bool(f["og"].title), _fixed("Add og:title meta tag")),
    Rule("OG Description", lambda f: bool(f["og"].description), _fixed("Add og:description")),
    Rule("OG Image", lambda f: bool(f["og"].image), _fixed("Add og:image for social sharing")),
    Rule("Twitter Card", lambda f: bool(f["twitter"].card), _fixed("Add twitter:card meta tag")),
    Rule("Canonical URL", lambda f: bool(f["canonical"]), _fixed("Add canonical link")),
    Rule("H1 tag present", lambda f: len(f["h1s"]) > 0, _fixed("Add an H1 heading")),
    Rule("Single H1", lambda f: len(f["h1s"]) == 1, lambda f: f"Found {len(f['h1s'])} H1 tags"),
    Rule("Viewport meta", lambda f: bool(f["viewport"]), _fixed("Add viewport meta for mobile")),
    Rule("All images have alt", lambda f: f["images"].missing_alt == 0,
         lambda f: f"{f['images'].missing_alt} images missing alt"),
)

TOTAL_CHECKS = len(CHECKLIST)
