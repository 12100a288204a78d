from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                (
                    "email",
                    models.EmailField(blank=True, default="", max_length=254),
                ),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("address", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "customers",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["first_name"], name="customers_first_name_idx"
                    ),
                    models.Index(
                        fields=["last_name"], name="customers_last_name_idx"
                    ),
                    models.Index(
                        fields=["first_name", "last_name"],
                        name="customers_full_name_idx",
                    ),
                ],
            },
        ),
    ]
