"""Pydantic models for request payloads."""

from pydantic import BaseModel, ConfigDict


class RegisterRequest(BaseModel):
    """Registration payload; presence is checked by the account service."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    """Login payload."""

    username: str | None = None
    password: str | None = None


class FridgeEntryRequest(BaseModel):
    """Fridge upsert payload; numeric quantities are kept as text."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = None
    quantity: str | None = None


class IngredientNameRequest(BaseModel):
    """Payload naming a catalog ingredient."""

    name: str | None = None


class DietaryRestrictionsRequest(BaseModel):
    """Selected health label ids, one id or a list; an empty list clears them."""

    selectedRestrictions: int | list[int]  # noqa: N815


class RecipeReference(BaseModel):
    """Recipe id as sent by the client."""

    recipeID: int  # noqa: N815


class WrappedRecipeRequest(BaseModel):
    """Recipe reference nested under ``data``."""

    data: RecipeReference
