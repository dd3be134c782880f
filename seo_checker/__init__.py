"""Single-page SEO checker: metadata extraction and checklist scoring."""

from .errors import FetchError
from .report import CheckResult, ImageStats, OpenGraph, Report, TwitterCard
from .on_page import OnPageAnalyzer
from .scoring import ScoringModule, build_report
