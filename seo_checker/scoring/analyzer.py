from functools import reduce

from ..on_page.analyzer import extract_fields
from ..report import Report
from .rules import CHECKLIST, TOTAL_CHECKS
from .util import add_check, percent


class ScoringModule:
    """Evaluates the fixed checklist against extracted on-page fields."""

    def score(self, fields: dict):
        checks, passed = reduce(lambda state, rule: add_check(state, rule, fields), CHECKLIST, ((), 0))
        return checks, percent(passed, TOTAL_CHECKS)

    def analyze(self, url: str, full_report_data: dict = None) -> Report:
        fields = full_report_data if full_report_data else extract_fields("", url)
        checks, score = self.score(fields)
        return Report(
            url=url or fields.get("url", ""),
            title=fields["title"],
            description=fields["description"],
            canonical=fields["canonical"],
            h1s=tuple(fields["h1s"]),
            images=fields["images"],
            og=fields["og"],
            twitter=fields["twitter"],
            viewport=fields["viewport"],
            robots=fields["robots"],
            charset=fields["charset"],
            checks=checks,
            score=score,
        )


def build_report(markup, url: str = "") -> Report:
    """Extracts and scores `markup`. Never raises for string input."""
    return ScoringModule().analyze(url, extract_fields(markup, url))
