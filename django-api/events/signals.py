"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.caching import (
    FEED_CACHE_KEY,
    LIST_CACHE_KEY,
    RAW_LIST_CACHE_KEY,
    detail_cache_key,
)
from events.models import Event


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate list, detail and feed caches when an event is saved or deleted."""
    cache.delete_many(
        [LIST_CACHE_KEY, RAW_LIST_CACHE_KEY, FEED_CACHE_KEY, detail_cache_key(str(instance.pk))]
    )
