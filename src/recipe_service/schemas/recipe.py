"""Recipe API request and response schemas."""

from __future__ import annotations

from pydantic import Field

from recipe_service.schemas.base import APIRequest, APIResponse


class RecipeSummary(APIResponse):
    """A recipe search hit."""

    id: int = Field(..., description="Recipe ID")
    title: str = Field(..., description="Recipe title")
    image: str | None = Field(default=None, description="Recipe image URL")


class RecipeSearchResponse(APIResponse):
    """One page of recipe search results."""

    results: list[RecipeSummary] = Field(default_factory=list)
    page: int = Field(..., ge=1, description="1-based page number")
    page_size: int = Field(..., ge=1, description="Effective page size")
    total_results: int = Field(..., ge=0, description="Total matching recipes")


class IngredientResponse(APIResponse):
    """An ingredient line in a recipe."""

    id: int | None = None
    name: str | None = None
    amount: float | None = None
    unit: str | None = None


class NutritionResponse(APIResponse):
    """Headline nutrition values and caloric breakdown.

    Missing values are reported as zero.
    """

    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrates: float = 0.0
    fiber: float = 0.0
    percent_protein: float = 0.0
    percent_fat: float = 0.0
    percent_carbs: float = 0.0


class RecipeDetailResponse(APIResponse):
    """Full recipe details."""

    id: int | None = Field(default=None, description="Recipe ID")
    title: str | None = Field(default=None, description="Recipe title")
    image: str | None = Field(default=None, description="Recipe image URL")
    ready_in_minutes: int | None = Field(default=None, description="Total time")
    servings: int | None = Field(default=None, description="Number of servings")
    ingredients: list[IngredientResponse] = Field(default_factory=list)
    nutrition: NutritionResponse = Field(default_factory=NutritionResponse)
    instructions: list[str] = Field(default_factory=list)


class ExcludeIngredientsRequest(APIRequest):
    """Request body for recalculating a recipe without some ingredients."""

    ingredient_ids: list[int] = Field(
        ...,
        description="IDs of the ingredients to exclude",
        examples=[[1001, 2004]],
    )
