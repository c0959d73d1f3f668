import decimal

import django.core.validators
import django.db.models.functions.text
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=100)),
                (
                    "description",
                    models.TextField(blank=True, default=None, null=True),
                ),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[
                            django.core.validators.MinValueValidator(
                                decimal.Decimal("0")
                            )
                        ],
                    ),
                ),
                ("in_stock", models.BooleanField(default=False)),
                (
                    "category",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("ELECTRONICS", "Electronics"),
                            ("CLOTHING", "Clothing"),
                            ("BOOKS", "Books"),
                            ("HOME", "Home"),
                            ("TOYS", "Toys"),
                            ("SPORTS", "Sports"),
                            ("GROCERY", "Grocery"),
                            ("BEAUTY", "Beauty"),
                        ],
                        default=None,
                        max_length=32,
                        null=True,
                    ),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["name"],
                "indexes": [
                    models.Index(
                        fields=["category", "in_stock"],
                        name="products_category_stock_idx",
                    )
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("price__gte", 0)),
                        name="products_price_non_negative",
                    ),
                    models.UniqueConstraint(
                        django.db.models.functions.text.Lower("name"),
                        name="products_name_ci_unique",
                    ),
                ],
            },
        ),
    ]
