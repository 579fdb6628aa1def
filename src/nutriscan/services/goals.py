"""Personal nutrition goal calculations."""

from nutriscan.domain.errors import InvalidInputError
from nutriscan.domain.goals import BodyMassIndex, GoalProfile, GoalTargets, GoalTemplate

KCAL_PER_KG = 7700
MIN_CARBS_G = 50

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

GOAL_TEMPLATES: dict[str, GoalTemplate] = {
    "cut_sugar": GoalTemplate(
        name="Cut Sugar",
        description="Reduce sugar intake for better health",
        protein_per_kg=1.6,
        fat_per_kg=0.8,
        sugar_limit=25,
        weight_goal="lose",
        weekly_target_kg=0.5,
    ),
    "gain_muscle": GoalTemplate(
        name="Gain Muscle",
        description="Build lean muscle mass with high protein",
        protein_per_kg=2.2,
        fat_per_kg=0.8,
        sugar_limit=50,
        weight_goal="gain",
        weekly_target_kg=0.5,
    ),
    "lose_fat": GoalTemplate(
        name="Lose Fat",
        description="Burn fat while maintaining muscle",
        protein_per_kg=2.2,
        fat_per_kg=0.9,
        sugar_limit=30,
        weight_goal="lose",
        weekly_target_kg=0.5,
    ),
    "balanced": GoalTemplate(
        name="Balanced Diet",
        description="Maintain healthy balanced nutrition",
        protein_per_kg=1.6,
        fat_per_kg=0.9,
        sugar_limit=50,
        weight_goal="maintain",
        weekly_target_kg=0,
    ),
    "low_carb": GoalTemplate(
        name="Low Carb",
        description="Reduce carbs, increase healthy fats",
        protein_per_kg=1.8,
        fat_per_kg=1.2,
        sugar_limit=20,
        weight_goal="lose",
        weekly_target_kg=0.5,
    ),
    "athletic": GoalTemplate(
        name="Athletic Performance",
        description="Fuel for high-intensity workouts",
        protein_per_kg=1.8,
        fat_per_kg=0.8,
        sugar_limit=60,
        weight_goal="maintain",
        weekly_target_kg=0,
    ),
}


def basal_metabolic_rate(
    weight_kg: float, height_cm: float, age: int, gender: str
) -> float:
    """Mifflin-St Jeor BMR in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == "male" else base - 161


def body_mass_index(weight_kg: float, height_cm: float) -> BodyMassIndex:
    """BMI rounded to one decimal with its category."""
    height_m = height_cm / 100
    value = weight_kg / (height_m * height_m)
    if value < 18.5:
        category = "underweight"
    elif value < 25:
        category = "normal"
    elif value < 30:
        category = "overweight"
    else:
        category = "obese"
    return BodyMassIndex(value=round(value, 1), category=category)


def validate_target_weight(profile: GoalProfile, template: GoalTemplate) -> None:
    """Reject target weights that contradict the template's direction."""
    target = profile.target_weight_kg
    if target is None:
        return
    current = profile.weight_kg
    if template.weight_goal == "gain" and target <= current:
        raise InvalidInputError(
            "Target weight must be higher than current weight for muscle gain goals"
        )
    if template.weight_goal == "lose" and target >= current:
        raise InvalidInputError(
            "Target weight must be lower than current weight for fat loss goals"
        )
    if template.weight_goal == "maintain" and target != current:
        raise InvalidInputError(
            "Target weight must equal current weight for maintenance goals"
        )


def calculate_goals(profile: GoalProfile) -> GoalTargets:
    """Compute daily calorie and macro targets for a profile."""
    template = GOAL_TEMPLATES.get(profile.template)
    if template is None:
        raise InvalidInputError(f"Unknown goal template: {profile.template}")
    validate_target_weight(profile, template)

    bmr = basal_metabolic_rate(
        profile.weight_kg, profile.height_cm, profile.age, profile.gender
    )
    tdee = bmr * ACTIVITY_MULTIPLIERS[profile.activity_level]
    weekly_target = (
        profile.weekly_target_kg
        if profile.weekly_target_kg is not None
        else template.weekly_target_kg
    )
    daily_adjustment = weekly_target * KCAL_PER_KG / 7
    target = tdee
    if template.weight_goal == "lose":
        target -= daily_adjustment
    elif template.weight_goal == "gain":
        target += daily_adjustment

    calories = round(target)
    protein = round(profile.weight_kg * template.protein_per_kg)
    fat = round(profile.weight_kg * template.fat_per_kg)
    remaining = calories - protein * 4 - fat * 9
    carbs = round(max(remaining / 4, MIN_CARBS_G))
    return GoalTargets(
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        sugar=template.sugar_limit,
        template=profile.template,
        bmr=round(bmr),
        tdee=round(tdee),
        bmi=body_mass_index(profile.weight_kg, profile.height_cm),
    )
