import pytest

from nutrilog.services.nutrition_service import (
    NutrientAmounts,
    NutrientsPer100g,
    bmr,
    calorie_goals,
    scale,
    target_calories,
    tdee,
)

BANANA = NutrientsPer100g(calories=89, protein=1.1, carbs=22.8, fat=0.3, fiber=2.6, sugar=12.2, sodium=1)


def test_scale_zero_quantity_is_all_zero():
    assert scale(BANANA, 0) == NutrientAmounts()


def test_scale_100g_reproduces_stored_values():
    assert scale(BANANA, 100).to_dict() == pytest.approx(BANANA.to_dict())


def test_scale_200g_doubles_every_field():
    doubled = scale(BANANA, 200).to_dict()
    for field, value in BANANA.to_dict().items():
        assert doubled[field] == pytest.approx(value * 2)


def test_scale_missing_nutrients_become_zero():
    amounts = scale(NutrientsPer100g(calories=200, protein=10), 150)
    assert amounts.calories == pytest.approx(300)
    assert amounts.protein == pytest.approx(15)
    assert amounts.carbs == 0 and amounts.sodium == 0


def test_scaled_amounts_cannot_be_scaled_again():
    with pytest.raises(TypeError):
        scale(scale(BANANA, 50), 50)


def test_bmr_gender_offset_is_166():
    for w, h, a in [(1, 50, 1), (70, 170, 25), (1000, 300, 150)]:
        assert bmr(w, h, a, "male") - bmr(w, h, a, "female") == pytest.approx(166)


def test_bmr_known_value():
    assert bmr(70, 170, 25, "male") == pytest.approx(1642.5)
    assert bmr(60, 165, 30, "female") == pytest.approx(1320.25)


def test_bmr_monotonicity():
    assert bmr(70, 170, 30, "male") < bmr(70, 170, 29, "male")
    assert bmr(71, 170, 30, "female") > bmr(70, 170, 30, "female")
    assert bmr(70, 171, 30, "female") > bmr(70, 170, 30, "female")


def test_bmr_rejects_unknown_gender():
    with pytest.raises(ValueError):
        bmr(70, 170, 25, "other")


@pytest.mark.parametrize("level,factor", [
    ("sedentary", 1.2),
    ("lightly_active", 1.375),
    ("moderately_active", 1.55),
    ("very_active", 1.725),
])
def test_tdee_factors(level, factor):
    assert tdee(1000, level) == pytest.approx(1000 * factor)


@pytest.mark.parametrize("level", ["couch_potato", "", None, "SEDENTARY"])
def test_tdee_unknown_level_is_sedentary(level):
    assert tdee(1500, level) == tdee(1500, "sedentary")


def test_target_calories_goals():
    assert target_calories(2000, "maintain") == 2000
    assert target_calories(2000, "lose") + 1000 == target_calories(2000, "gain")


def test_calorie_goals_uses_defaults_for_incomplete_profile():
    goals = calorie_goals({"age": None, "weight": None}, "moderately_active", "maintain", 0)
    assert goals["profile_complete"] is False
    assert goals["bmr"] == pytest.approx(1642.5)
    assert goals["tdee"] == pytest.approx(round(1642.5 * 1.55, 1))


def test_calorie_goals_progress_is_capped():
    profile = {"age": 30, "weight": 60, "height": 165, "gender": "female"}
    goals = calorie_goals(profile, "sedentary", "lose", 5000)
    assert goals["profile_complete"] is True
    assert goals["progress_percent"] == 100.0
    assert goals["remaining"] < 0
