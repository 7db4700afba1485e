import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                (
                    "event_type",
                    models.CharField(
                        choices=[
                            ("meeting", "Meeting"),
                            ("camp", "Camp"),
                            ("trip", "Trip"),
                            ("special", "Special"),
                            ("fundraising", "Fundraising"),
                            ("other", "Other"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "age_group",
                    models.CharField(
                        choices=[("beavers", "Beavers"), ("cubs", "Cubs"), ("scouts", "Scouts")],
                        max_length=20,
                    ),
                ),
                ("starts_at", models.DateTimeField()),
                ("ends_at", models.DateTimeField()),
                ("location", models.CharField(max_length=500)),
                ("description", models.TextField()),
                ("cost", models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ("what_to_bring", models.TextField(blank=True, null=True)),
                ("rsvp_deadline", models.DateTimeField(blank=True, null=True)),
                ("organizer_name", models.CharField(blank=True, max_length=100, null=True)),
                ("organizer_contact", models.CharField(blank=True, max_length=200, null=True)),
                ("is_recurring", models.BooleanField(default=False)),
                ("recurrence_rule", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("published", "Published"),
                            ("cancelled", "Cancelled"),
                            ("archived", "Archived"),
                        ],
                        default="draft",
                        max_length=20,
                    ),
                ),
                ("cancellation_reason", models.TextField(blank=True, null=True)),
                ("created_by", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["starts_at"],
                "indexes": [
                    models.Index(fields=["status", "starts_at"], name="event_status_start_idx"),
                    models.Index(fields=["event_type", "starts_at"], name="event_type_start_idx"),
                ],
            },
        ),
    ]
