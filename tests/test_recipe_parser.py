import pytest
from kitchen_scaler.models import Ingredient
from kitchen_scaler.services.recipe_parser import parse_recipe


class TestRecipeParser:

    def test_standard_line(self, recipe_parser):
        """Quantity, unit, then name."""
        result = recipe_parser.parse("2 cups flour")
        assert result == [Ingredient(quantity=2, unit="cups", name="Flour", raw_qty="2")]

    def test_glued_suffix_quantity(self, recipe_parser):
        """Name first with the unit glued to the quantity."""
        result = recipe_parser.parse("Baking powder 2½tsp")
        assert len(result) == 1
        assert result[0].quantity == pytest.approx(2.5)
        assert result[0].unit == "teaspoons"
        assert result[0].name == "Baking powder"
        assert result[0].raw_qty == "2½"

    def test_count_item_has_empty_unit(self, recipe_parser):
        result = recipe_parser.parse("3 eggs")
        assert result == [Ingredient(quantity=3, unit="", name="Eggs", raw_qty="3")]

    def test_garbage_is_dropped(self, recipe_parser):
        assert recipe_parser.parse("asdkjh") == []

    def test_empty_input(self, recipe_parser):
        assert recipe_parser.parse("") == []
        assert recipe_parser.parse("\n \n") == []

    def test_unit_is_singular_only_for_exactly_one(self, recipe_parser):
        assert recipe_parser.parse("1 cup sugar")[0].unit == "cup"
        assert recipe_parser.parse("1/2 cup sugar")[0].unit == "cups"

    def test_word_one_becomes_a_number(self, recipe_parser):
        result = recipe_parser.parse("one cup sugar")
        assert result == [Ingredient(quantity=1, unit="cup", name="Sugar", raw_qty="1")]

    def test_mixed_number(self, recipe_parser):
        result = recipe_parser.parse("2 1/2 cups milk")[0]
        assert result.quantity == pytest.approx(2.5)
        assert result.raw_qty == "2 1/2"

    def test_decimal_and_fraction_quantities(self, recipe_parser):
        assert recipe_parser.parse("2.5 cups water")[0].quantity == pytest.approx(2.5)
        result = recipe_parser.parse("1,5 l milk")[0]
        assert (result.quantity, result.unit, result.raw_qty) == (1.5, "liters", "1,5")
        assert recipe_parser.parse("1/2 cup sugar")[0].quantity == 0.5

    def test_mixed_number_with_spaced_glyph(self, recipe_parser):
        """A fraction glyph after a space belongs to the quantity in every line shape."""
        for text in ("1 ½ cups milk", "Milk 1 ½ cups", "Milk: 1 ½ cups", "Milk (1 ½ cups)"):
            result = recipe_parser.parse(text)
            assert len(result) == 1, text
            assert (result[0].quantity, result[0].unit, result[0].name) == (1.5, "cups", "Milk"), text
        assert recipe_parser.parse("1 ½ cups milk")[0].raw_qty == "1 ½"

    def test_spaced_glyph_count_item(self, recipe_parser):
        result = recipe_parser.parse("2 ¼ eggs")[0]
        assert (result.quantity, result.unit, result.name) == (2.25, "", "Eggs")

    def test_fluid_ounces(self, recipe_parser):
        assert recipe_parser.parse("2 fl oz milk") == [
            Ingredient(quantity=2, unit="fluid ounces", name="Milk", raw_qty="2")
        ]
        assert recipe_parser.parse("Cream 1 fl. oz")[0].unit == "fluid ounce"

    def test_alias_is_canonicalized(self, recipe_parser):
        assert recipe_parser.parse("1 1/2 Tbsp butter")[0].unit == "tablespoons"
        assert recipe_parser.parse("Sugar = 200 g")[0].unit == "grams"

    def test_parenthetical_quantity(self, recipe_parser):
        result = recipe_parser.parse("Butter (2 tbsp, softened)")
        assert result == [Ingredient(quantity=2, unit="tablespoons", name="Butter", raw_qty="2")]

    def test_separator_with_trailing_note(self, recipe_parser):
        result = recipe_parser.parse("Flour: 2 cups sifted")[0]
        assert result.name == "Flour sifted"
        assert result.unit == "cups"

    def test_separator_is_removed_from_name(self, recipe_parser):
        assert recipe_parser.parse("Milk: 1 cup")[0].name == "Milk"
        assert recipe_parser.parse("Sugar = 200 g")[0].name == "Sugar"

    def test_bracketed_note(self, recipe_parser):
        assert recipe_parser.parse("2 cups flour [sifted]")[0].name == "Flour sifted"

    def test_count_name_first(self, recipe_parser):
        result = recipe_parser.parse("eggs 2")
        assert result == [Ingredient(quantity=2, unit="", name="Eggs", raw_qty="2")]

    def test_trailing_unit_word_without_unit_slot_is_rejected(self, recipe_parser):
        assert recipe_parser.parse("flour cup 2") == []

    def test_unknown_unit_falls_through_to_count(self, recipe_parser):
        result = recipe_parser.parse("2 xyzzy flour")
        assert result == [Ingredient(quantity=2, unit="", name="Xyzzy flour", raw_qty="2")]

    def test_zero_quantity_is_dropped(self, recipe_parser):
        assert recipe_parser.parse("0 cups flour") == []

    def test_count_words_act_as_units(self, recipe_parser):
        result = recipe_parser.parse("3 large eggs")[0]
        assert result.unit == "large"
        assert result.name == "Eggs"

    def test_noisy_lines_are_normalized(self, recipe_parser):
        assert recipe_parser.parse("x4 eggs")[0].quantity == 4
        result = recipe_parser.parse("yep: one cup milk?")[0]
        assert (result.quantity, result.unit, result.name) == (1, "cup", "Milk")
        assert recipe_parser.parse("• 2 cups flour")[0].name == "Flour"

    def test_inline_enumeration(self, recipe_parser):
        result = recipe_parser.parse("Flour (2 cups), Sugar (1 cup)")
        assert [(i.name, i.quantity, i.unit) for i in result] == [
            ("Flour", 2, "cups"),
            ("Sugar", 1, "cup"),
        ]

    def test_order_is_preserved_and_bad_lines_skipped(self, recipe_parser):
        text = "2 cups flour\nasdkjh\n3 eggs\nSugar = 200 g"
        result = recipe_parser.parse(text)
        assert [i.name for i in result] == ["Flour", "Eggs", "Sugar"]

    def test_every_parsed_quantity_is_positive(self, recipe_parser):
        text = "2 cups flour\n0 eggs\n1/0 cup milk\n½ tsp salt\nthree"
        for ingredient in recipe_parser.parse(text):
            assert ingredient.quantity > 0


def test_parse_recipe_entry_point():
    assert parse_recipe("2 cups flour")[0].name == "Flour"
    assert parse_recipe("asdkjh") == []
