import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ItemRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("description", models.CharField(max_length=200)),
                ("created", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "requestor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="item_requests",
                        to="users.user",
                    ),
                ),
            ],
            options={
                "verbose_name": "Запрос вещи",
                "verbose_name_plural": "Запросы вещей",
                "ordering": ["-created"],
                "indexes": [
                    models.Index(fields=["requestor", "created"], name="item_request_requestor_idx"),
                ],
            },
        ),
    ]
