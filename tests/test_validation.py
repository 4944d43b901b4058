"""
Food Places API: Validation Unit Tests
======================================

What we test:
    ✅ Valid bodies pass unchanged
    ✅ Missing, empty and whitespace-only names are rejected
    ✅ Ratings outside [0, 5] are rejected, the bounds themselves accepted
    ✅ Name is checked before rating
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from foodplaces.exceptions import ValidationError
from foodplaces.middleware.validation import (
    NAME_REQUIRED,
    RATING_OUT_OF_RANGE,
    check_food_place,
    validate_food_place,
)
from foodplaces.schemas.food_place import FoodPlacePayload


class TestCheckFoodPlace:

    def test_accepts_valid_data(self):
        check_food_place("Pizza Palace", 4.5)

    def test_rating_is_optional(self):
        check_food_place("Pizza Palace", None)

    @pytest.mark.parametrize("rating", [0, 0.0, 5, 5.0, 2.5])
    def test_accepts_rating_bounds(self, rating):
        check_food_place("Pizza Palace", rating)

    @pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
    def test_rejects_missing_or_blank_name(self, name):
        with pytest.raises(ValidationError) as exc_info:
            check_food_place(name, 4.0)
        assert exc_info.value.message == NAME_REQUIRED
        assert exc_info.value.field == "name"

    @pytest.mark.parametrize("rating", [-0.1, -1, 5.01, 6.0, 100])
    def test_rejects_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError) as exc_info:
            check_food_place("Pizza Palace", rating)
        assert exc_info.value.message == RATING_OUT_OF_RANGE
        assert exc_info.value.context["rating"] == rating

    def test_name_error_wins_over_rating_error(self):
        with pytest.raises(ValidationError) as exc_info:
            check_food_place("", 6.0)
        assert exc_info.value.message == NAME_REQUIRED


class TestValidateFoodPlaceDependency:

    @pytest.mark.asyncio
    async def test_returns_payload_unchanged(self, valid_food_place):
        payload = FoodPlacePayload(**valid_food_place)
        result = await validate_food_place(payload)
        assert result is payload

    @pytest.mark.asyncio
    async def test_missing_body_fails_on_name(self):
        with pytest.raises(ValidationError) as exc_info:
            await validate_food_place(None)
        assert exc_info.value.message == NAME_REQUIRED

    @pytest.mark.asyncio
    async def test_raises_for_invalid_payload(self, invalid_food_place):
        with pytest.raises(ValidationError):
            await validate_food_place(FoodPlacePayload(**invalid_food_place))


class TestFoodPlacePayload:

    def test_ignores_unknown_fields(self, valid_food_place):
        payload = FoodPlacePayload(**valid_food_place, owner="someone", id=42)
        assert set(payload.store_fields()) == {
            "name", "address", "cuisine_type", "rating", "price_range",
        }

    def test_missing_fields_become_none(self):
        payload = FoodPlacePayload(name="Only Name")
        assert payload.store_fields() == {
            "name": "Only Name",
            "address": None,
            "cuisine_type": None,
            "rating": None,
            "price_range": None,
        }

    @pytest.mark.parametrize("rating", [True, False])
    def test_rejects_boolean_rating(self, rating):
        with pytest.raises(PydanticValidationError):
            FoodPlacePayload(name="Pizza Palace", rating=rating)

    @pytest.mark.parametrize("rating,expected", [(4, 4.0), (4.5, 4.5), ("3.5", 3.5)])
    def test_accepts_numeric_rating(self, rating, expected):
        assert FoodPlacePayload(name="Pizza Palace", rating=rating).rating == expected
