import pytest
from kitchen_scaler.services.recipe_parser import RecipeParser
from kitchen_scaler.services.yield_validator import YieldValidator
from kitchen_scaler.services.density_store import DensityStore, density_store as shared_density_store


@pytest.fixture
def recipe_parser():
    """Fixture for RecipeParser instance."""
    return RecipeParser()


@pytest.fixture
def yield_validator():
    """Fixture for YieldValidator with the default servings cap."""
    return YieldValidator(max_yield=10000)


@pytest.fixture
def density_store(tmp_path):
    """DensityStore backed by a throwaway JSON file."""
    return DensityStore(str(tmp_path / "custom_densities.json"))


@pytest.fixture
def isolated_density_store(tmp_path, monkeypatch):
    """Point the API's shared density store at a temp file."""
    monkeypatch.setattr(shared_density_store, "path", str(tmp_path / "api_densities.json"))
    return shared_density_store
