"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def leader(django_user_model):
    return django_user_model.objects.create_user(username="akela", password="dyb-dyb-dyb")


@pytest.fixture
def leader_client(leader) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=leader)
    return client


@pytest.fixture
def create_event(db):
    """Persist an ORM event; keyword arguments override the defaults."""
    from events import models

    def _create(**overrides: Any) -> models.Event:
        starts_at = overrides.pop(
            "starts_at", datetime.now(timezone.utc).replace(microsecond=0) + timedelta(days=7)
        )
        fields: dict[str, Any] = {
            "title": "Pack Meeting",
            "event_type": "meeting",
            "age_group": "cubs",
            "starts_at": starts_at,
            "ends_at": starts_at + timedelta(hours=2),
            "location": "Scout Hut",
            "description": "Regular pack night",
            "status": "published",
            "created_by": "test-user-id",
        }
        fields.update(overrides)
        return models.Event.objects.create(**fields)

    return _create


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
