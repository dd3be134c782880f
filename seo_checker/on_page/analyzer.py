import logging

from ..base_module import SEOModule
from .title_meta import extract_title, extract_meta_description
from .headings_images import extract_h1s, extract_image_stats
from .head_tags import extract_canonical, extract_charset, extract_viewport, extract_robots
from .social import extract_open_graph, extract_twitter_card

logger = logging.getLogger(__name__)


def extract_fields(markup, url: str = "") -> dict:
    """
    Runs every extractor over `markup`. Each extractor is an independent
    pattern match, so a malformed tag only empties its own field.
    """
    if not isinstance(markup, str):
        markup = ""

    fields = {
        "url": url or "",
        "title": extract_title(markup),
        "description": extract_meta_description(markup),
        "canonical": extract_canonical(markup),
        "h1s": extract_h1s(markup),
        "images": extract_image_stats(markup),
        "og": extract_open_graph(markup),
        "twitter": extract_twitter_card(markup),
        "viewport": extract_viewport(markup),
        "robots": extract_robots(markup),
        "charset": extract_charset(markup),
    }
    logger.debug(
        "Extracted %s: title=%d chars, %d h1, %d/%d images missing alt",
        url or "<markup>", len(fields["title"]), len(fields["h1s"]),
        fields["images"].missing_alt, fields["images"].total,
    )
    return fields


class OnPageAnalyzer(SEOModule):
    """Fetches a page and extracts its on-page SEO fields."""

    def extract(self, markup, url: str = "") -> dict:
        return extract_fields(markup, url)

    def analyze(self, url: str) -> dict:
        markup = self.fetch_markup(url)
        return self.extract(markup, url)
