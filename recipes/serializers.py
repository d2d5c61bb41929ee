from rest_framework import serializers

from .formula import FormulaEngine, FormulaError
from .models import Ingredient, IngredientReading, Recipe


# Ingredient Serializers
class IngredientSerializer(serializers.ModelSerializer):
    """Serializer for creating and listing ingredients."""
    readings_count = serializers.SerializerMethodField()

    class Meta:
        model = Ingredient
        fields = ["id", "name", "description", "unit", "readings_count", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_name(self, value):
        """Names are referenced as [name]; brackets would make them unreachable."""
        if "[" in value or "]" in value:
            raise serializers.ValidationError("Ingredient names cannot contain square brackets")
        return value

    def get_readings_count(self, obj):
        """Return count of recorded readings."""
        return obj.readings.count()


# IngredientReading Serializers
class IngredientReadingSerializer(serializers.ModelSerializer):
    """Serializer for recording an ingredient value on a date. A null value records the date without a reading."""
    ingredient = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = IngredientReading
        fields = ["id", "ingredient", "date", "value", "notes", "created_at"]
        read_only_fields = ["id", "created_at"]
        extra_kwargs = {"value": {"required": False, "allow_null": True}}

    def validate_date(self, value):
        """Reject a second reading for the same ingredient and date."""
        ingredient = self.context.get("ingredient")
        if ingredient is None:
            return value
        existing = IngredientReading.objects.filter(ingredient=ingredient, date=value)
        if self.instance is not None:
            existing = existing.exclude(pk=self.instance.pk)
        if existing.exists():
            raise serializers.ValidationError(f"{ingredient.name} already has a reading for {value}")
        return value


# Recipe Serializers
class RecipeCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating and updating recipes."""
    class Meta:
        model = Recipe
        fields = ["code", "name", "description", "unit", "formula", "ingredients"]

    def validate(self, attrs):
        """Check the formula parses and only references the recipe's ingredients."""
        formula = attrs.get("formula", getattr(self.instance, "formula", None))
        if "ingredients" in attrs:
            ingredients = attrs["ingredients"]
        elif self.instance is not None:
            ingredients = list(self.instance.ingredients.all())
        else:
            ingredients = []

        try:
            FormulaEngine(formula, [{"name": ingredient.name} for ingredient in ingredients], strict=True)
        except FormulaError as e:
            raise serializers.ValidationError({"formula": str(e)})

        return attrs


class RecipeDetailSerializer(serializers.ModelSerializer):
    """Serializer for recipe detail view with ingredient names."""
    ingredients = serializers.SerializerMethodField()

    class Meta:
        model = Recipe
        fields = [
            "id", "code", "name", "description", "unit", "formula",
            "ingredients", "created_at", "updated_at"
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def get_ingredients(self, obj):
        """Return ingredient ids and names."""
        return [{"id": str(ingredient.id), "name": ingredient.name} for ingredient in obj.ingredients.all()]


class RecipeValueQuerySerializer(serializers.Serializer):
    """Query parameters for evaluating a recipe."""
    date = serializers.DateField(required=False)
