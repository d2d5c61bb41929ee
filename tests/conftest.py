"""Shared fixtures for recipe tests."""

from __future__ import annotations

import io

import pytest
from django.core.management import call_command
from rest_framework.test import APIClient

from recipes.models import Recipe


@pytest.fixture
def revenue_ingredients() -> list[dict]:
    """Two monthly series with one explicit gap each."""
    return [
        {
            "name": "Monthly Recurring Revenue",
            "values": {
                "2014-11-30": 12640.00,
                "2014-12-31": None,
                "2015-02-28": 14257.34,
            },
        },
        {
            "name": "Monthly Expenses",
            "values": {
                "2014-11-30": None,
                "2014-12-31": 9015.03,
                "2015-02-28": 9349.45,
            },
        },
    ]


@pytest.fixture
def letter_ingredients() -> list[dict]:
    return [{"name": name} for name in "abcde"]


@pytest.fixture
def api_client(django_user_model) -> APIClient:
    user = django_user_model.objects.create_user(username="analyst", password="secret")
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def sample_recipes(db) -> dict[str, Recipe]:
    """Load the sample data set and return recipes keyed by code."""
    call_command("load_sample_recipes", stdout=io.StringIO())
    return {recipe.code: recipe for recipe in Recipe.objects.all()}
