"""
Tests del dispatcher y de `ModificationRequest`.
"""

import logging

import pytest

from recipe_ai_core.domains.modifications import (
    UnsupportedModificationType,
    dispatch,
    get_strategy,
)
from recipe_ai_core.domains.modifications import strategies
from recipe_ai_core.domains.modifications.dispatcher import STRATEGIES
from recipe_ai_core.domains.modifications.models import (
    IncreaseFiberParams,
    ModificationRequest,
    ModificationType,
    PortionSizeParams,
    ReduceCaloriesParams,
)


def test_every_modification_type_has_a_strategy():
    assert set(STRATEGIES) == set(ModificationType)


@pytest.mark.parametrize("tag", [t.value for t in ModificationType])
def test_get_strategy_accepts_plain_strings(tag):
    assert get_strategy(tag) is STRATEGIES[ModificationType(tag)]


def test_get_strategy_rejects_unknown_tag(caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(UnsupportedModificationType) as exc_info:
            get_strategy("make_vegan")

    assert exc_info.value.modification_type == "make_vegan"
    assert "Unsupported modification type: make_vegan" in str(exc_info.value)
    assert "make_vegan" in caplog.text


def test_dispatch_routes_to_matching_strategy(recipe):
    request = ModificationRequest.of(PortionSizeParams(new_servings=6))

    result = dispatch(recipe, request)

    assert result == strategies.portion_size(recipe, PortionSizeParams(new_servings=6))


def test_dispatch_rejects_unknown_tag(recipe):
    request = ModificationRequest(modification_type="make_vegan", parameters={})

    with pytest.raises(UnsupportedModificationType):
        dispatch(recipe, request)


def test_request_rejects_parameters_of_another_type():
    with pytest.raises(TypeError):
        ModificationRequest(
            modification_type=ModificationType.PORTION_SIZE,
            parameters=IncreaseFiberParams(target_fiber=10),
        )


def test_request_of_takes_tag_from_parameters():
    request = ModificationRequest.of(ReduceCaloriesParams(target_calories=300))

    assert request.modification_type == "reduce_calories"


def test_request_from_dict_maps_camel_case_parameters():
    request = ModificationRequest.from_dict(
        {
            "modificationType": "reduce_calories",
            "parameters": {"targetCalories": 300, "reductionPercentage": None},
        }
    )

    assert request.modification_type is ModificationType.REDUCE_CALORIES
    assert request.parameters == ReduceCaloriesParams(target_calories=300)


def test_request_from_dict_rejects_unknown_tag():
    with pytest.raises(UnsupportedModificationType):
        ModificationRequest.from_dict({"modificationType": "make_vegan", "parameters": {}})
