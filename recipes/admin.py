from django.contrib import admin
from .models import Ingredient, IngredientReading, Recipe


class IngredientReadingInline(admin.TabularInline):
    model = IngredientReading
    extra = 0
    fields = ("date", "value", "notes")


@admin.register(Ingredient)
class IngredientAdmin(admin.ModelAdmin):
    list_display = ("name", "unit", "created_at")
    search_fields = ("name", "description")
    readonly_fields = ("id", "created_at", "updated_at")
    inlines = [IngredientReadingInline]


@admin.register(IngredientReading)
class IngredientReadingAdmin(admin.ModelAdmin):
    list_display = ("ingredient", "date", "value", "created_at")
    list_filter = ("date",)
    search_fields = ("ingredient__name", "notes")
    readonly_fields = ("id", "created_at")


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "formula", "unit", "created_at")
    search_fields = ("code", "name", "description", "formula")
    filter_horizontal = ("ingredients",)
    readonly_fields = ("id", "created_at", "updated_at")
