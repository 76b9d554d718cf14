from typing import Iterable, List
from kitchen_scaler.models import Ingredient, ScaledIngredient

INGREDIENT_FIELDS = set(Ingredient.model_fields)


def scale_ingredient(ingredient: Ingredient, ratio: float) -> ScaledIngredient:
    return ScaledIngredient(
        **ingredient.model_dump(include=INGREDIENT_FIELDS),
        scaled_qty=ingredient.quantity * ratio,
        scaled_unit=ingredient.unit
    )


def scale_ingredients(
    ingredients: Iterable[Ingredient],
    original_yield: float,
    desired_yield: float
) -> List[ScaledIngredient]:
    """Scale every ingredient by desired_yield / original_yield.

    Both yields must already be validated as finite and > 0 (see
    ``yield_validator``); no checks happen here. Each ingredient is scaled
    independently and the inputs are left untouched.
    """
    ratio = desired_yield / original_yield
    return [scale_ingredient(ingredient, ratio) for ingredient in ingredients]
