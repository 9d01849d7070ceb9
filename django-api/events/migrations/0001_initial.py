import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, default="")),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                (
                    "location",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("organizer_id", models.UUIDField()),
                ("creator_id", models.UUIDField(default=uuid.uuid4, editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["start_date"], name="events_event_start_idx")
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("name",), name="events_event_name_unique"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("price__gt", 0)),
                        name="events_event_price_positive",
                    ),
                ],
            },
        ),
    ]
