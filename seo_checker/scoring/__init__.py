"""Checklist scoring package."""

from .analyzer import ScoringModule, build_report
from .rules import CHECKLIST, TOTAL_CHECKS
