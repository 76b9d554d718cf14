from types import MappingProxyType
from typing import Dict, Mapping, Optional

DEFAULT_DENSITY = 1.0  # water

# Ingredient density database (g/ml)
BUILTIN_DENSITIES: Mapping[str, float] = MappingProxyType({
    # Flours
    "flour": 0.53, "all-purpose flour": 0.53, "ap flour": 0.53,
    "bread flour": 0.56, "cake flour": 0.49, "whole wheat flour": 0.57,
    "almond flour": 0.48, "coconut flour": 0.43, "rice flour": 0.55,

    # Sugars
    "sugar": 0.84, "white sugar": 0.84, "granulated sugar": 0.84,
    "brown sugar": 0.93, "powdered sugar": 0.51, "confectioners sugar": 0.51,
    "caster sugar": 0.88, "maple sugar": 0.80, "coconut sugar": 0.85,

    # Fats & Oils
    "butter": 0.92, "unsalted butter": 0.92, "margarine": 0.93,
    "shortening": 0.91, "oil": 0.92, "vegetable oil": 0.92,
    "olive oil": 0.92, "coconut oil": 0.92, "canola oil": 0.92,

    # Liquids
    "water": 1.0, "milk": 1.03, "whole milk": 1.03, "skim milk": 1.033,
    "heavy cream": 1.01, "half and half": 1.02, "buttermilk": 1.03,
    "yogurt": 1.04, "sour cream": 1.02,

    # Leavening & Starches
    "baking soda": 0.93, "baking powder": 0.93, "cornstarch": 0.54,
    "arrowroot": 0.50, "tapioca starch": 0.60, "potato starch": 0.55,

    # Salts
    "salt": 1.2, "table salt": 1.2, "kosher salt": 0.8, "sea salt": 1.1,

    # Flavorings
    "cocoa powder": 0.51, "vanilla extract": 0.85, "almond extract": 0.95,

    # Nuts & Seeds
    "almonds": 0.56, "walnuts": 0.52, "pecans": 0.54, "peanuts": 0.62,
    "cashews": 0.58, "chia seeds": 0.62, "flax seeds": 0.65, "sesame seeds": 0.60,

    # Sweeteners
    "honey": 1.42, "maple syrup": 1.33, "molasses": 1.42, "corn syrup": 1.38,
    "agave": 1.35, "stevia": 0.3,

    # Fruits & Vegetables
    "applesauce": 1.04, "mashed banana": 1.10, "pumpkin puree": 1.03,
    "tomato paste": 1.15, "tomato sauce": 1.02,

    # Eggs
    "egg": 1.0, "egg white": 1.04, "egg yolk": 1.03,

    # Other
    "yeast": 0.63, "gelatin": 0.68, "breadcrumbs": 0.45, "oats": 0.43,
    "rice": 0.85, "quinoa": 0.75, "lentils": 0.80,
})


def build_density_table(
    custom: Optional[Mapping[str, float]] = None,
    builtin: Mapping[str, float] = BUILTIN_DENSITIES,
) -> Mapping[str, float]:
    """Merge built-in densities with custom overrides; custom wins on collision.

    Built fresh on every call so lookups always reflect the latest custom set.
    """
    merged: Dict[str, float] = dict(builtin)
    for name, density in (custom or {}).items():
        merged[str(name).strip().lower()] = float(density)
    return MappingProxyType(merged)


def lookup_density(
    ingredient: str,
    custom: Optional[Mapping[str, float]] = None,
    builtin: Mapping[str, float] = BUILTIN_DENSITIES,
) -> float:
    table = build_density_table(custom, builtin)
    density = table.get((ingredient or "").strip().lower())
    if not density or density <= 0:
        return DEFAULT_DENSITY
    return density
