"""Recipe domain models.

Immutable snapshots of provider recipe data. Field names follow Python
conventions; aliases match the provider's camelCase JSON so payloads can be
validated directly with ``Recipe.model_validate(data)``.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from recipe_service.schemas.base import DownstreamResponse


class DomainModel(DownstreamResponse):
    """Frozen base for domain snapshots.

    Unknown provider fields are ignored and instances cannot be mutated,
    so a single value can be shared between concurrent requests.
    """

    model_config = ConfigDict(frozen=True)


class Nutrient(DomainModel):
    """A single named nutrient amount."""

    name: str = Field(default="Unknown", description="Display name, e.g. 'Protein'")
    amount: float = Field(default=0.0, description="Nutrient amount")
    unit: str = Field(default="", description="Display unit, passed through")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        """Default missing or blank names."""
        if v is None or not str(v).strip():
            return "Unknown"
        return str(v)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: float | None) -> float:
        """Treat a missing amount as zero."""
        return 0.0 if v is None else v

    @field_validator("unit", mode="before")
    @classmethod
    def validate_unit(cls, v: str | None) -> str:
        """Treat a missing unit as empty."""
        return "" if v is None else v


class CaloricBreakdown(DomainModel):
    """Share of derived calories from each macronutrient, in percent."""

    percent_protein: float = 0.0
    percent_fat: float = 0.0
    percent_carbs: float = 0.0

    @field_validator("percent_protein", "percent_fat", "percent_carbs", mode="before")
    @classmethod
    def validate_percent(cls, v: float | None) -> float:
        """Treat a missing percentage as zero."""
        return 0.0 if v is None else v

    @property
    def total(self) -> float:
        """Sum of the three percentages."""
        return self.percent_protein + self.percent_fat + self.percent_carbs


class NutritionProfile(DomainModel):
    """Recipe-level nutrient totals and caloric breakdown."""

    nutrients: tuple[Nutrient, ...] = ()
    caloric_breakdown: CaloricBreakdown | None = None

    @field_validator("nutrients", mode="before")
    @classmethod
    def validate_nutrients(cls, v: Any) -> Any:
        """Treat a null nutrient list as empty."""
        return () if v is None else v

    def find_amount(self, name: str) -> float:
        """Return the amount of the named nutrient, or 0 when absent."""
        return find_nutrient_amount(self.nutrients, name)


class IngredientNutrition(DomainModel):
    """Per-ingredient nutrient breakdown, when the provider supplies one."""

    nutrients: tuple[Nutrient, ...] = ()

    @field_validator("nutrients", mode="before")
    @classmethod
    def validate_nutrients(cls, v: Any) -> Any:
        """Treat a null nutrient list as empty."""
        return () if v is None else v


class Ingredient(DomainModel):
    """An ingredient line within a recipe.

    ``id`` is unique within a recipe but not globally.
    """

    id: int | None = Field(default=None, description="Ingredient identifier")
    name: str | None = Field(default=None, description="Ingredient name")
    amount: float | None = Field(default=None, description="Quantity, may be absent")
    unit: str | None = Field(default=None, description="Free-text unit")
    nutrition: IngredientNutrition | None = Field(
        default=None,
        description="Itemized nutrients for this ingredient",
    )

    @property
    def itemized_nutrients(self) -> tuple[Nutrient, ...]:
        """Per-ingredient nutrients, empty when not itemized."""
        if self.nutrition is None:
            return ()
        return self.nutrition.nutrients


class InstructionStep(DomainModel):
    """A numbered preparation step."""

    number: int = 0
    step: str = ""

    @field_validator("number", mode="before")
    @classmethod
    def validate_number(cls, v: int | None) -> int:
        """Treat a missing step number as zero."""
        return 0 if v is None else v

    @field_validator("step", mode="before")
    @classmethod
    def validate_step(cls, v: str | None) -> str:
        """Treat missing step text as empty."""
        return "" if v is None else v


class AnalyzedInstruction(DomainModel):
    """A group of structured preparation steps."""

    steps: tuple[InstructionStep, ...] = ()

    @field_validator("steps", mode="before")
    @classmethod
    def validate_steps(cls, v: Any) -> Any:
        """Treat a null step list as empty."""
        return () if v is None else v


class Recipe(DomainModel):
    """Complete recipe snapshot with ingredients and nutrition."""

    id: int | None = Field(default=None, description="Provider recipe ID")
    title: str | None = Field(default=None, description="Recipe title")
    image: str | None = Field(default=None, description="Recipe image URL")
    servings: int | None = Field(default=None, description="Number of servings")
    ready_in_minutes: int | None = Field(
        default=None,
        description="Total time in minutes",
    )
    instructions: str | None = Field(default=None, description="Free-text method")
    ingredients: tuple[Ingredient, ...] = Field(
        default=(),
        alias="extendedIngredients",
        description="Ingredients in recipe order",
    )
    nutrition: NutritionProfile | None = Field(
        default=None,
        description="Recipe-level nutrition",
    )
    analyzed_instructions: tuple[AnalyzedInstruction, ...] = Field(
        default=(),
        description="Structured preparation steps",
    )

    @field_validator("ingredients", "analyzed_instructions", mode="before")
    @classmethod
    def validate_sequences(cls, v: Any) -> Any:
        """Treat null lists from the provider as empty."""
        return () if v is None else v

    @property
    def ingredient_ids(self) -> frozenset[int]:
        """IDs of every ingredient in the recipe."""
        return frozenset(ing.id for ing in self.ingredients if ing.id is not None)


def find_nutrient_amount(nutrients: tuple[Nutrient, ...], name: str) -> float:
    """Find a nutrient amount by case-insensitive name.

    Args:
        nutrients: Nutrients to search.
        name: Display name of the nutrient (e.g. "Protein").

    Returns:
        Amount of the first matching nutrient, or 0.0 if none matches.
    """
    wanted = name.casefold()
    for nutrient in nutrients:
        if nutrient.name.casefold() == wanted:
            return nutrient.amount
    return 0.0
