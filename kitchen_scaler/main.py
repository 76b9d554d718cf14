from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
import time
import uuid
from typing import List
from kitchen_scaler.models import (
    ConvertRequest, ConvertResponse, DensityListResponse, DensityUpsert, FormatRequest,
    FormatResponse, ParseRequest, ParseResponse, QuickConvertRequest, QuickConvertResponse,
    ScaleRequest, ScaleResponse, ScaledLine, UnitInfo
)
from kitchen_scaler.core.densities import BUILTIN_DENSITIES
from kitchen_scaler.core.logging_config import get_logger, setup_logging
from kitchen_scaler.core.settings import settings
from kitchen_scaler.core.units import UNIT_TABLE
from kitchen_scaler.services.density_converter import (
    convert_detailed, convert_ingredient_amount, quick_convert
)
from kitchen_scaler.services.density_store import DensityValidationError, density_store
from kitchen_scaler.services.kitchen_formatter import format_kitchen_quantity
from kitchen_scaler.services.recipe_parser import recipe_parser
from kitchen_scaler.services.scaler import scale_ingredients
from kitchen_scaler.services.yield_validator import yield_validator

setup_logging(settings.log_level)
app = FastAPI(title="Kitchen Scaler API", version="0.1.0")
logger = get_logger(__name__)


class NoIngredientsError(Exception):
    def __init__(self, line_count: int):
        super().__init__("Could not parse any ingredients")
        self.line_count = line_count


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = str(uuid.uuid4())
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000.0
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} "
        f"{duration_ms:.1f}ms request_id={request_id}"
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(NoIngredientsError)
async def no_ingredients_error_handler(request: Request, exc: NoIngredientsError):
    logger.warning(f"No ingredients parsed from {exc.line_count} non-empty lines")
    return JSONResponse(
        status_code=422,
        content={
            "error_code": "NO_INGREDIENTS_FOUND",
            "message": "No ingredients found. Please check your recipe format.",
            "suggestion": "Put one ingredient per line, e.g. '2 cups flour'."
        }
    )


@app.exception_handler(DensityValidationError)
async def density_error_handler(request: Request, exc: DensityValidationError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error_code": exc.error_code, "message": exc.message}
    )


def _parse_or_raise(text: str):
    ingredients = recipe_parser.parse(text)
    if not ingredients:
        raise NoIngredientsError(len([line for line in text.splitlines() if line.strip()]))
    return ingredients


@app.get("/")
def read_root():
    return {"message": "Welcome to the Kitchen Scaler API. Visit /docs for documentation."}


@app.post("/api/parse", response_model=ParseResponse)
def parse_recipe_text(request: ParseRequest):
    """
    Parse free-form recipe text into structured ingredients.
    """
    ingredients = _parse_or_raise(request.text)
    return ParseResponse(count=len(ingredients), ingredients=ingredients)


@app.post("/api/scale", response_model=ScaleResponse)
def scale_recipe(request: ScaleRequest):
    """
    Parse recipe text and scale every ingredient from original to desired yield.
    """
    yield_validator.validate(request.original_yield, request.desired_yield)
    ingredients = _parse_or_raise(request.text)
    scaled = scale_ingredients(ingredients, request.original_yield, request.desired_yield)

    lines = []
    for ingredient in scaled:
        original = f"{ingredient.raw_qty} {ingredient.unit}" if ingredient.unit else ingredient.raw_qty
        lines.append(ScaledLine(
            ingredient=ingredient,
            display=format_kitchen_quantity(ingredient.scaled_qty, ingredient.scaled_unit),
            original_display=original
        ))

    logger.info(
        f"Scaled {len(lines)} ingredients from {request.original_yield:g} "
        f"to {request.desired_yield:g} servings"
    )
    return ScaleResponse(
        original_yield=request.original_yield,
        desired_yield=request.desired_yield,
        ratio=request.desired_yield / request.original_yield,
        count=len(lines),
        lines=lines
    )


@app.post("/api/format", response_model=FormatResponse)
def format_quantity(request: FormatRequest):
    return FormatResponse(
        quantity=request.quantity,
        unit=request.unit,
        display=format_kitchen_quantity(request.quantity, request.unit)
    )


@app.post("/api/convert", response_model=ConvertResponse)
def convert_units(request: ConvertRequest):
    """
    Convert between weight and volume units, using ingredient density when needed.
    Unknown units return the value unchanged.
    """
    custom = density_store.load()
    conversion = convert_detailed(
        request.value, request.from_unit, request.to_unit, request.ingredient, custom
    )
    return ConvertResponse(
        value=request.value,
        from_unit=request.from_unit,
        to_unit=request.to_unit,
        ingredient=request.ingredient,
        result=conversion.result,
        density=conversion.density
    )


@app.post("/api/convert/quick", response_model=QuickConvertResponse)
def quick_convert_units(request: QuickConvertRequest):
    if request.ingredient:
        custom = density_store.load()
        conversion = convert_ingredient_amount(request.value, request.unit, request.ingredient, custom)
        summary_of = f" of {request.ingredient}"
    else:
        conversion = quick_convert(request.value, request.unit)
        summary_of = ""

    if conversion is None:
        raise HTTPException(
            status_code=400,
            detail={
                "error_code": "UNSUPPORTED_UNIT",
                "message": f"Cannot convert from '{request.unit}'.",
                "suggestion": "Enter a number and a weight or volume unit first (e.g., 250 g)."
            }
        )

    return QuickConvertResponse(
        value=request.value,
        from_unit=request.unit,
        result=conversion.result,
        to_unit=conversion.to_unit,
        summary=f"Converted {request.value:g} {request.unit}{summary_of} to {conversion.result:g} {conversion.to_unit}"
    )


@app.get("/api/units", response_model=List[UnitInfo])
def list_units():
    return [
        UnitInfo(
            alias=entry.alias,
            canonical=entry.canonical,
            unit_class=entry.unit_class.value,
            to_base=entry.to_base
        )
        for entry in UNIT_TABLE.entries()
    ]


@app.get("/api/densities", response_model=DensityListResponse)
def list_densities():
    return DensityListResponse(
        builtin=dict(BUILTIN_DENSITIES),
        custom=density_store.load()
    )


@app.put("/api/densities", response_model=DensityListResponse)
def upsert_density(request: DensityUpsert):
    custom = density_store.add(request.name, request.grams_per_ml)
    return DensityListResponse(builtin=dict(BUILTIN_DENSITIES), custom=custom)


@app.delete("/api/densities/{name}", response_model=DensityListResponse)
def delete_density(name: str):
    custom = density_store.remove(name)
    return DensityListResponse(builtin=dict(BUILTIN_DENSITIES), custom=custom)
