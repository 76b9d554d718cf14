from typing import List, Optional, Dict
from pydantic import BaseModel, ConfigDict, Field, constr


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantity: float = Field(..., gt=0, description="Parsed quantity, always positive")
    unit: str = Field(default="", description="Canonical unit in display form, empty for count items")
    name: str
    raw_qty: str = Field(..., description="Quantity token as typed")


class ScaledIngredient(Ingredient):
    scaled_qty: float
    scaled_unit: str = ""


class ParseRequest(BaseModel):
    text: str = Field(..., description="Free-form recipe text, one ingredient per line")


class ParseResponse(BaseModel):
    count: int
    ingredients: List[Ingredient]


class ScaleRequest(BaseModel):
    text: str = Field(..., description="Free-form recipe text, one ingredient per line")
    original_yield: float = Field(..., description="Servings the recipe was written for")
    desired_yield: float = Field(..., description="Servings wanted")


class ScaledLine(BaseModel):
    ingredient: ScaledIngredient
    display: str = Field(..., description="Kitchen-friendly scaled quantity, e.g. '1 ½ cups'")
    original_display: str


class ScaleResponse(BaseModel):
    original_yield: float
    desired_yield: float
    ratio: float
    count: int
    lines: List[ScaledLine]


class FormatRequest(BaseModel):
    quantity: float
    unit: str = ""


class FormatResponse(BaseModel):
    quantity: float
    unit: str
    display: str


class ConvertRequest(BaseModel):
    value: float
    from_unit: constr(strip_whitespace=True, min_length=1)
    to_unit: constr(strip_whitespace=True, min_length=1)
    ingredient: str = Field(default="water", description="Ingredient used for the density lookup")


class ConvertResponse(BaseModel):
    value: float
    from_unit: str
    to_unit: str
    ingredient: str
    result: float
    density: Optional[float] = Field(
        default=None, description="Density used when converting between weight and volume"
    )


class QuickConvertRequest(BaseModel):
    value: float
    unit: constr(strip_whitespace=True, min_length=1)
    ingredient: Optional[str] = Field(
        default=None, description="Convert volume to grams / weight to cups for this ingredient"
    )


class QuickConvertResponse(BaseModel):
    value: float
    from_unit: str
    result: float
    to_unit: str
    summary: str


class UnitInfo(BaseModel):
    alias: str
    canonical: str
    unit_class: str
    to_base: float


class DensityUpsert(BaseModel):
    name: str
    grams_per_ml: float = Field(..., description="Density in grams per milliliter")


class DensityListResponse(BaseModel):
    builtin: Dict[str, float]
    custom: Dict[str, float]
