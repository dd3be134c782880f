from ..report import OpenGraph, TwitterCard
from .title_meta import get_meta_content

OPEN_GRAPH_FIELDS = ("title", "description", "image", "type", "url")
TWITTER_CARD_FIELDS = ("card", "title", "description", "image")


def extract_open_graph(markup: str) -> OpenGraph:
    return OpenGraph(**{f: get_meta_content(markup, f"og:{f}") for f in OPEN_GRAPH_FIELDS})


def extract_twitter_card(markup: str) -> TwitterCard:
    return TwitterCard(**{f: get_meta_content(markup, f"twitter:{f}") for f in TWITTER_CARD_FIELDS})
