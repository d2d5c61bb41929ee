import uuid
from django.db import models


class Ingredient(models.Model):
    """A named data series that recipes can reference as ``[name]``."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)  # e.g., "Monthly Expenses"
    description = models.TextField(blank=True)
    unit = models.CharField(max_length=50, blank=True)  # %, USD, count, etc.
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class IngredientReading(models.Model):
    """
    The value of an ingredient on a date.

    A reading with a null value records the date without a number; a date
    with no reading at all is unknown to the ingredient.
    """

    id = models.BigAutoField(primary_key=True)
    ingredient = models.ForeignKey(Ingredient, on_delete=models.CASCADE, related_name="readings")
    date = models.DateField()
    value = models.DecimalField(max_digits=16, decimal_places=6, null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["ingredient", "date"]
        unique_together = ("ingredient", "date")
        indexes = [
            models.Index(fields=["ingredient", "date"]),
        ]

    def __str__(self) -> str:
        return f"{self.ingredient.name} @ {self.date}"


class Recipe(models.Model):
    """A business metric computed from ingredients with an arithmetic formula."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=64, unique=True)  # e.g., "NET-MONTHLY-INCOME"
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    unit = models.CharField(max_length=50, blank=True)
    formula = models.TextField(help_text="Arithmetic over numbers and [Ingredient Name] references")
    ingredients = models.ManyToManyField(Ingredient, blank=True, related_name="recipes")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["code"]),
        ]

    def __str__(self) -> str:
        return f"{self.code}: {self.name}"
