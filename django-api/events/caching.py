"""Cache keys shared by the views that fill them and the signals that clear them."""

from django.conf import settings

LIST_CACHE_KEY = "events:list"
RAW_LIST_CACHE_KEY = "events:list:raw"
FEED_CACHE_KEY = "events:feed"


def detail_cache_key(event_id: str) -> str:
    return f"events:{event_id}"


def cache_timeout() -> int:
    return settings.EVENTS["CACHE_TIMEOUT"]
