from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from typing import Tuple, Optional
import logging
import uuid

from .formula import FormulaError
from .models import Ingredient, Recipe
from .serializers import (
    IngredientSerializer, IngredientReadingSerializer,
    RecipeCreateSerializer, RecipeDetailSerializer,
    RecipeValueQuerySerializer,
)
from .utils import evaluate_recipe, evaluate_recipe_series, serialize_outcome

logger = logging.getLogger(__name__)


def validate_uuid(pk: str, label: str) -> Tuple[Optional[uuid.UUID], Optional[Response]]:
    """
    Validate and convert a primary key string to UUID.

    Args:
        pk: Primary key string to validate
        label: Object name used in the error message

    Returns:
        Tuple of (uuid_object, error_response):
        - On success: (UUID object, None)
        - On failure: (None, Response with error)
    """
    try:
        return uuid.UUID(str(pk)), None
    except (ValueError, TypeError):
        error_response = Response(
            {"status": 400, "message": f"Invalid {label} ID format"},
            status=status.HTTP_400_BAD_REQUEST
        )
        return None, error_response


def get_recipe(pk) -> Tuple[Optional[Recipe], Optional[Response]]:
    recipe_uuid, error_response = validate_uuid(pk, "recipe")
    if error_response:
        return None, error_response
    try:
        return Recipe.objects.prefetch_related("ingredients").get(pk=recipe_uuid), None
    except Recipe.DoesNotExist:
        return None, Response({"status": 404, "message": "Recipe not found"}, status=status.HTTP_404_NOT_FOUND)


def broken_formula_response(recipe: Recipe, error: FormulaError) -> Response:
    logger.error(f"Stored formula for recipe {recipe.code} cannot be evaluated: {error}")
    return Response(
        {"status": 422, "message": f"Recipe formula cannot be evaluated: {error}"},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY
    )


# Ingredient Views
class IngredientListCreateAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        queryset = Ingredient.objects.prefetch_related("readings")
        serializer = IngredientSerializer(queryset, many=True)
        return Response({"status": 200, "data": serializer.data}, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = IngredientSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"status": 201, "data": serializer.data}, status=status.HTTP_201_CREATED)


class IngredientReadingListCreateAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get_ingredient(self, ingredient_id):
        ingredient_uuid, error_response = validate_uuid(ingredient_id, "ingredient")
        if error_response:
            return None, error_response
        try:
            return Ingredient.objects.get(pk=ingredient_uuid), None
        except Ingredient.DoesNotExist:
            return None, Response({"status": 404, "message": "Ingredient not found"}, status=status.HTTP_404_NOT_FOUND)

    def get(self, request, ingredient_id):
        ingredient, error_response = self.get_ingredient(ingredient_id)
        if error_response:
            return error_response

        serializer = IngredientReadingSerializer(ingredient.readings.order_by("date"), many=True)
        return Response({"status": 200, "data": serializer.data}, status=status.HTTP_200_OK)

    def post(self, request, ingredient_id):
        ingredient, error_response = self.get_ingredient(ingredient_id)
        if error_response:
            return error_response

        serializer = IngredientReadingSerializer(data=request.data, context={"ingredient": ingredient})
        serializer.is_valid(raise_exception=True)
        serializer.save(ingredient=ingredient)
        return Response({"status": 201, "data": serializer.data}, status=status.HTTP_201_CREATED)


# Recipe Views
class RecipeListCreateAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        queryset = Recipe.objects.prefetch_related("ingredients")
        serializer = RecipeDetailSerializer(queryset, many=True)
        return Response({"status": 200, "data": serializer.data}, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = RecipeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"status": 201, "data": RecipeDetailSerializer(serializer.instance).data}, status=status.HTTP_201_CREATED)


class RecipeDetailAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        recipe, error_response = get_recipe(pk)
        if error_response:
            return error_response
        return Response({"status": 200, "data": RecipeDetailSerializer(recipe).data}, status=status.HTTP_200_OK)

    def put(self, request, pk):
        return self.update(request, pk, partial=False)

    def patch(self, request, pk):
        return self.update(request, pk, partial=True)

    def update(self, request, pk, partial):
        recipe, error_response = get_recipe(pk)
        if error_response:
            return error_response

        serializer = RecipeCreateSerializer(recipe, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"status": 200, "data": RecipeDetailSerializer(serializer.instance).data}, status=status.HTTP_200_OK)

    def delete(self, request, pk):
        recipe, error_response = get_recipe(pk)
        if error_response:
            return error_response

        recipe.delete()
        return Response({"status": 204, "message": "Recipe deleted successfully"}, status=status.HTTP_204_NO_CONTENT)


class RecipeValueAPIView(APIView):
    """Evaluate a recipe for one date, given as ?date=YYYY-MM-DD."""
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        recipe, error_response = get_recipe(pk)
        if error_response:
            return error_response

        query = RecipeValueQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(
                {"status": 400, "message": "'date' must be a valid date (YYYY-MM-DD)"},
                status=status.HTTP_400_BAD_REQUEST
            )
        on_date = query.validated_data.get("date")

        try:
            outcome = evaluate_recipe(recipe, on_date)
        except FormulaError as e:
            return broken_formula_response(recipe, e)

        return Response({"status": 200, "data": serialize_outcome(outcome, on_date)}, status=status.HTTP_200_OK)


class RecipeSeriesAPIView(APIView):
    """Evaluate a recipe for every date its ingredients have readings for."""
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        recipe, error_response = get_recipe(pk)
        if error_response:
            return error_response

        try:
            series = evaluate_recipe_series(recipe)
        except FormulaError as e:
            return broken_formula_response(recipe, e)

        data = [serialize_outcome(outcome, on_date) for on_date, outcome in series.items()]
        return Response({"status": 200, "data": data}, status=status.HTTP_200_OK)
