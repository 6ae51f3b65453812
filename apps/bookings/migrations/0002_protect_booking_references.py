import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("bookings", "0001_initial"),
        ("items", "0002_protect_item_owner"),
    ]

    operations = [
        migrations.AlterField(
            model_name="booking",
            name="booker",
            field=models.ForeignKey(
                on_delete=django.db.models.deletion.PROTECT,
                related_name="bookings",
                to="users.user",
            ),
        ),
        migrations.AlterField(
            model_name="booking",
            name="item",
            field=models.ForeignKey(
                on_delete=django.db.models.deletion.PROTECT,
                related_name="bookings",
                to="items.item",
            ),
        ),
    ]
