"""Value types for the result of a page check.

Every field defaults to an empty value, so a ``Report()`` built from empty
or garbage markup is still fully shaped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class CheckResult:
    label: str
    passed: bool
    tip: str = ""

    def to_dict(self) -> dict:
        return {"label": self.label, "pass": self.passed, "tip": self.tip}


@dataclass(frozen=True)
class ImageStats:
    total: int = 0
    missing_alt: int = 0

    def to_dict(self) -> dict:
        return {"total": self.total, "missingAlt": self.missing_alt}


@dataclass(frozen=True)
class OpenGraph:
    title: str = ""
    description: str = ""
    image: str = ""
    type: str = ""
    url: str = ""

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "type": self.type,
            "url": self.url,
        }


@dataclass(frozen=True)
class TwitterCard:
    card: str = ""
    title: str = ""
    description: str = ""
    image: str = ""

    def to_dict(self) -> dict:
        return {
            "card": self.card,
            "title": self.title,
            "description": self.description,
            "image": self.image,
        }


@dataclass(frozen=True)
class Report:
    url: str = ""
    title: str = ""
    description: str = ""
    canonical: str = ""
    h1s: Tuple[str, ...] = ()
    images: ImageStats = field(default_factory=ImageStats)
    og: OpenGraph = field(default_factory=OpenGraph)
    twitter: TwitterCard = field(default_factory=TwitterCard)
    viewport: str = ""
    robots: str = ""
    charset: str = ""
    checks: Tuple[CheckResult, ...] = ()
    score: int = 0

    @property
    def passed_count(self) -> int:
        return sum(1 for c in self.checks if c.passed)

    @property
    def failed_checks(self) -> Tuple[CheckResult, ...]:
        return tuple(c for c in self.checks if not c.passed)

    def to_dict(self) -> dict:
        """Flat wire shape of the report, as served by the /check route."""
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "canonical": self.canonical,
            "h1s": list(self.h1s),
            "og": self.og.to_dict(),
            "twitter": self.twitter.to_dict(),
            "viewport": self.viewport,
            "robots": self.robots,
            "charset": self.charset,
            "images": self.images.to_dict(),
            "checks": [c.to_dict() for c in self.checks],
            "score": self.score,
        }
