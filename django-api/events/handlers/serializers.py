"""Serializers for validating API input and rendering domain models."""

from rest_framework import serializers

from events import models


class EventSerializer(serializers.Serializer):
    """Serializer for the Event domain model (and expanded occurrences)."""

    id = serializers.CharField()
    title = serializers.CharField()
    event_type = serializers.CharField(source="event_type.value")
    age_group = serializers.CharField(source="age_group.value")
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    location = serializers.CharField()
    description = serializers.CharField()
    cost = serializers.SerializerMethodField()
    what_to_bring = serializers.CharField(allow_null=True)
    rsvp_deadline = serializers.DateTimeField(allow_null=True)
    organizer_name = serializers.CharField(allow_null=True)
    organizer_contact = serializers.CharField(allow_null=True)
    is_recurring = serializers.BooleanField()
    recurrence_rule = serializers.CharField(allow_null=True)
    series_id = serializers.CharField(allow_null=True)
    status = serializers.CharField(source="status.value")
    cancellation_reason = serializers.CharField(allow_null=True)
    created_by = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField(allow_null=True)

    def get_cost(self, event) -> str | None:
        return str(event.cost) if event.cost is not None else None


class EventInputSerializer(serializers.Serializer):
    """Validates create/update payloads. Use partial=True for updates."""

    title = serializers.CharField(max_length=200)
    event_type = serializers.ChoiceField(choices=models.Event.EventType.choices)
    age_group = serializers.ChoiceField(choices=models.Event.AgeGroup.choices)
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    location = serializers.CharField(max_length=500)
    description = serializers.CharField()
    cost = serializers.DecimalField(
        max_digits=8, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    what_to_bring = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    rsvp_deadline = serializers.DateTimeField(required=False, allow_null=True)
    organizer_name = serializers.CharField(
        max_length=100, required=False, allow_null=True, allow_blank=True
    )
    organizer_contact = serializers.CharField(
        max_length=200, required=False, allow_null=True, allow_blank=True
    )
    is_recurring = serializers.BooleanField(default=False)
    recurrence_rule = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
    status = serializers.ChoiceField(
        choices=models.Event.Status.choices, default=models.Event.Status.DRAFT.value
    )
    cancellation_reason = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    def validate(self, attrs):
        starts_at = attrs.get("starts_at")
        ends_at = attrs.get("ends_at")
        if starts_at is not None and ends_at is not None and ends_at <= starts_at:
            raise serializers.ValidationError({"ends_at": "End must be after start."})
        return attrs
