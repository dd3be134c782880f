"""On-Page extraction package.

Provides `OnPageAnalyzer` which runs a set of independent pattern-match
extractors implemented in sibling modules under this package.
"""

from .analyzer import OnPageAnalyzer, extract_fields
from .title_meta import get_meta_content
