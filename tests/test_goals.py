import pytest

from api.schemas import ActivityLevel, Gender, UserProfileIn, WeightGoal
from api.services.goals import basal_metabolic_rate, calculate_goals


def _profile(**kw):
    data = dict(age=25, height=170, weight=70, gender="Masculino", activity_level="Moderado", goal="Mantener peso")
    data.update(kw)
    return UserProfileIn(**data)


def test_reference_male_moderate_maintain():
    g = calculate_goals(_profile())
    assert g is not None
    assert (g.calories, g.protein, g.carbs, g.fat, g.fiber, g.sodium) == (2546, 159, 286, 85, 25, 2300)


def test_bmr_formulas():
    assert basal_metabolic_rate(70, 170, 25, Gender.MASCULINO) == pytest.approx(1642.5)
    assert basal_metabolic_rate(70, 170, 25, Gender.FEMENINO) == pytest.approx(1476.5)


@pytest.mark.parametrize("gender", ["Femenino", "Otro"])
def test_non_male_share_formula(gender):
    # 1476.5 × 1.2 = 1771.8
    assert calculate_goals(_profile(gender=gender, activity_level="Sedentario")).calories == 1772


@pytest.mark.parametrize("goal,delta", [
    (WeightGoal.PERDER_PESO, -500),
    (WeightGoal.MANTENER_PESO, 0),
    (WeightGoal.GANAR_PESO, 500),
    (WeightGoal.GANAR_MASA_MUSCULAR, 500),
])
def test_goal_adjustment(goal, delta):
    base = calculate_goals(_profile()).calories
    assert calculate_goals(_profile(goal=goal)).calories == base + delta


@pytest.mark.parametrize("level,mult", [
    (ActivityLevel.SEDENTARIO, 1.2),
    (ActivityLevel.LIGERO, 1.375),
    (ActivityLevel.MODERADO, 1.55),
    (ActivityLevel.ACTIVO, 1.725),
    (ActivityLevel.MUY_ACTIVO, 1.9),
])
def test_activity_multipliers(level, mult):
    assert calculate_goals(_profile(activity_level=level)).calories == round(1642.5 * mult)


@pytest.mark.parametrize("missing", ["age", "height", "weight", "gender"])
def test_missing_biometrics_returns_none(missing):
    assert calculate_goals(_profile(**{missing: None})) is None


def test_fiber_and_sodium_fixed():
    g = calculate_goals(_profile(age=60, weight=95, height=185, activity_level="Muy Activo", goal="Perder peso"))
    assert (g.fiber, g.sodium) == (25, 2300)


def test_pure_function():
    p = _profile()
    assert calculate_goals(p) == calculate_goals(p)
    assert p == _profile()
