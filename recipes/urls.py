from django.urls import path
from .views import (
    IngredientListCreateAPIView,
    IngredientReadingListCreateAPIView,
    RecipeListCreateAPIView,
    RecipeDetailAPIView,
    RecipeValueAPIView,
    RecipeSeriesAPIView,
)


urlpatterns = [
    # Ingredients
    path("ingredients/", IngredientListCreateAPIView.as_view(), name="ingredient-list"),
    path("ingredients/<str:ingredient_id>/readings/", IngredientReadingListCreateAPIView.as_view(), name="ingredient-reading-list"),

    # Recipes
    path("recipes/", RecipeListCreateAPIView.as_view(), name="recipe-list"),
    path("recipes/<str:pk>/", RecipeDetailAPIView.as_view(), name="recipe-detail"),
    path("recipes/<str:pk>/value/", RecipeValueAPIView.as_view(), name="recipe-value"),
    path("recipes/<str:pk>/series/", RecipeSeriesAPIView.as_view(), name="recipe-series"),
]
