"""Unit tests for recipe response mappers."""

from __future__ import annotations

import pytest

from recipe_service.clients.spoonacular.schemas import (
    SpoonacularRecipeSummary,
    SpoonacularSearchResponse,
)
from recipe_service.mappers.recipe import (
    build_nutrition_response,
    build_recipe_detail_response,
    build_search_response,
    extract_instructions,
)
from recipe_service.models.recipe import NutritionProfile, Recipe
from tests.fixtures.recipes import (
    build_recipe,
    itemized_recipe_payload,
    macros,
    nutrient,
    proportional_recipe_payload,
)


pytestmark = pytest.mark.unit


class TestBuildSearchResponse:
    """Tests for build_search_response."""

    def test_maps_results_and_paging(self) -> None:
        """Should copy hits and use the requested page values."""
        provider = SpoonacularSearchResponse(
            results=[
                SpoonacularRecipeSummary(id=1, title="Pasta", image="p.jpg"),
                SpoonacularRecipeSummary(id=2, title="Pizza"),
            ],
            offset=9,
            number=2,
            total_results=11,
        )

        response = build_search_response(provider, page=2, page_size=9)

        assert [r.id for r in response.results] == [1, 2]
        assert response.results[0].image == "p.jpg"
        assert response.results[1].image is None
        assert response.page == 2
        assert response.page_size == 9
        assert response.total_results == 11

    def test_serializes_camel_case(self) -> None:
        """Should use camelCase keys in the API body."""
        provider = SpoonacularSearchResponse(results=[], total_results=0)

        body = build_search_response(provider, page=1, page_size=9).model_dump()

        assert body == {"results": [], "page": 1, "pageSize": 9, "totalResults": 0}


class TestBuildNutritionResponse:
    """Tests for build_nutrition_response."""

    def test_extracts_headline_values(self) -> None:
        """Should pick nutrients by name and copy the breakdown."""
        nutrition = NutritionProfile.model_validate(
            {
                "nutrients": [*macros(500, 25, 15, 50), nutrient("Fiber", 6)],
                "caloricBreakdown": {
                    "percentProtein": 20,
                    "percentFat": 27,
                    "percentCarbs": 53,
                },
            }
        )

        response = build_nutrition_response(nutrition)

        assert response.calories == 500
        assert response.protein == 25
        assert response.fat == 15
        assert response.carbohydrates == 50
        assert response.fiber == 6
        assert response.percent_protein == 20
        assert response.percent_fat == 27
        assert response.percent_carbs == 53

    def test_missing_nutrition_is_zero(self) -> None:
        """Should report zeros when the recipe has no nutrition."""
        response = build_nutrition_response(None)

        assert response.calories == 0
        assert response.percent_carbs == 0

    def test_missing_breakdown_is_zero(self) -> None:
        """Should report zero percentages without a breakdown."""
        nutrition = NutritionProfile.model_validate({"nutrients": macros(100, 5, 2, 10)})

        response = build_nutrition_response(nutrition)

        assert response.calories == 100
        assert response.fiber == 0
        assert response.percent_protein == 0


class TestExtractInstructions:
    """Tests for extract_instructions."""

    def test_prefers_structured_steps(self) -> None:
        """Should use analyzed steps in order when present."""
        recipe = build_recipe(
            [],
            instructions="Ignored text.",
            analyzedInstructions=[
                {"steps": [{"number": 1, "step": "Boil."}, {"number": 2, "step": "Drain."}]},
                {"steps": [{"number": 1, "step": "Serve."}]},
            ],
        )

        assert extract_instructions(recipe) == ["Boil.", "Drain.", "Serve."]

    def test_splits_free_text(self) -> None:
        """Should split free text into sentences ending with a period."""
        recipe = build_recipe([], instructions="Warm the milk. Stir in the honey. Add the oil")

        assert extract_instructions(recipe) == [
            "Warm the milk.",
            "Stir in the honey.",
            "Add the oil.",
        ]

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_no_instructions(self, text: str | None) -> None:
        """Should return an empty list when there is no method."""
        recipe = build_recipe([], instructions=text)

        assert extract_instructions(recipe) == []


class TestBuildRecipeDetailResponse:
    """Tests for build_recipe_detail_response."""

    def test_maps_full_recipe(self) -> None:
        """Should map identity, ingredients, nutrition and instructions."""
        recipe = Recipe.model_validate(proportional_recipe_payload())

        response = build_recipe_detail_response(recipe)

        assert response.id == 716429
        assert response.title == "Pasta with Garlic"
        assert response.servings == 2
        assert response.ready_in_minutes == 45
        assert [(i.id, i.name, i.amount, i.unit) for i in response.ingredients] == [
            (10, "milk", 1, "cup"),
            (11, "olive oil", 2, "tbsp"),
            (12, "honey", 2, "tbsp"),
        ]
        assert response.nutrition.calories == 600
        assert len(response.instructions) == 3

    def test_serializes_camel_case(self) -> None:
        """Should expose camelCase keys in the API body."""
        recipe = Recipe.model_validate(itemized_recipe_payload())

        body = build_recipe_detail_response(recipe).model_dump()

        assert "readyInMinutes" in body
        assert "percentProtein" in body["nutrition"]
        assert set(body["ingredients"][0]) == {"id", "name", "amount", "unit"}

