import re

from ..report import ImageStats

_H1_RE = re.compile(r"<h1[^>]*>(.*?)</h1>", re.I | re.S)
_TAG_RE = re.compile(r"<[^>]*>")
_IMG_RE = re.compile(r"<img ", re.I)
# An <img ...> opening tag with no alt= anywhere before its closing '>'
_IMG_NO_ALT_RE = re.compile(r"<img (?![^>]*alt=)[^>]*>", re.I)


def extract_h1s(markup: str) -> tuple[str, ...]:
    """Text of every <h1> in document order, nested tags removed. Duplicates are kept."""
    return tuple(_TAG_RE.sub("", inner).strip() for inner in _H1_RE.findall(markup or ""))


def count_images(markup: str) -> int:
    return len(_IMG_RE.findall(markup or ""))


def count_images_missing_alt(markup: str) -> int:
    return len(_IMG_NO_ALT_RE.findall(markup or ""))


def extract_image_stats(markup: str) -> ImageStats:
    return ImageStats(total=count_images(markup), missing_alt=count_images_missing_alt(markup))
