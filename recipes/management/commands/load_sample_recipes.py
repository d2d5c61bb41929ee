"""
Management command to load the sample recipes:
- Net Monthly Income: [Monthly Recurring Revenue] - [Monthly Expenses]
- Net Per Partner: ([Gross Income] - [Operating Costs]) / [Partners]

A reading of None records the month without a value.
"""
from datetime import date
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from recipes.models import Ingredient, IngredientReading, Recipe


SAMPLE_INGREDIENTS = {
    "Monthly Recurring Revenue": {
        "unit": "USD",
        "readings": {
            "2014-10-31": "11804.10",
            "2014-11-30": "12640.00",
            "2014-12-31": None,
            "2015-01-31": "13518.72",
            "2015-02-28": "14257.34",
        },
    },
    "Monthly Expenses": {
        "unit": "USD",
        "readings": {
            "2014-10-31": "8722.19",
            "2014-11-30": None,
            "2014-12-31": "9015.03",
            "2015-01-31": "9188.60",
            "2015-02-28": "9349.45",
        },
    },
    "Gross Income": {
        "unit": "USD",
        "readings": {
            "2014-08-31": "10000",
            "2015-02-28": "50",
        },
    },
    "Operating Costs": {
        "unit": "USD",
        "readings": {
            "2014-08-31": "2500",
            "2015-02-28": "50",
        },
    },
    "Partners": {
        "unit": "count",
        "readings": {
            "2014-08-31": "2",
            "2015-02-28": "1",
        },
    },
}

SAMPLE_RECIPES = [
    {
        "code": "NET-MONTHLY-INCOME",
        "name": "Net Monthly Income",
        "unit": "USD",
        "formula": "[Monthly Recurring Revenue] - [Monthly Expenses]",
        "ingredients": ["Monthly Recurring Revenue", "Monthly Expenses"],
    },
    {
        "code": "NET-PER-PARTNER",
        "name": "Net Per Partner",
        "unit": "USD",
        "formula": "([Gross Income] - [Operating Costs]) / [Partners]",
        "ingredients": ["Gross Income", "Operating Costs", "Partners"],
    },
]


class Command(BaseCommand):
    help = "Load the sample ingredients, readings and recipes"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Loading sample ingredients...")
        ingredients = {}
        readings_written = 0
        for name, definition in SAMPLE_INGREDIENTS.items():
            ingredient, created = Ingredient.objects.get_or_create(
                name=name,
                defaults={"unit": definition["unit"]},
            )
            ingredients[name] = ingredient
            if created:
                self.stdout.write(f"  ✓ Created ingredient {name}")

            for day, value in definition["readings"].items():
                IngredientReading.objects.update_or_create(
                    ingredient=ingredient,
                    date=date.fromisoformat(day),
                    defaults={"value": None if value is None else Decimal(value)},
                )
                readings_written += 1

        self.stdout.write(self.style.SUCCESS(f"✓ Wrote {readings_written} readings"))

        self.stdout.write("Loading sample recipes...")
        for definition in SAMPLE_RECIPES:
            recipe, created = Recipe.objects.update_or_create(
                code=definition["code"],
                defaults={
                    "name": definition["name"],
                    "unit": definition["unit"],
                    "formula": definition["formula"],
                },
            )
            recipe.ingredients.set([ingredients[name] for name in definition["ingredients"]])
            if created:
                self.stdout.write(self.style.SUCCESS(f"✓ Created recipe {recipe.code}"))
            else:
                self.stdout.write(f"  Recipe {recipe.code} already exists, updated")

        self.stdout.write(self.style.SUCCESS("Sample recipes loaded."))
