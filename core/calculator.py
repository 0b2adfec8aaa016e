import logging
import math
from decimal import Context, Decimal, ROUND_FLOOR, ROUND_HALF_UP, localcontext

from core.input_validator import InputValidator, InvalidInput

logger = logging.getLogger(__name__)

UNIT_SYSTEMS = ('metric', 'imperial')
GENDERS = ('male', 'female')
GOALS = ('lose', 'maintain', 'gain')

DEFAULT_UNIT = 'metric'
DEFAULT_GENDER = 'male'
DEFAULT_ACTIVITY_LEVEL = 'sedentary'
DEFAULT_GOAL = 'maintain'

# (exclusive upper bound, label, result panel colour)
BMI_CATEGORIES = (
    (18.5, 'Underweight', 'text-blue-400'),
    (25.0, 'Normal weight', 'text-green-400'),
    (30.0, 'Overweight', 'text-yellow-400'),
    (float('inf'), 'Obese', 'text-red-400'),
)

ACTIVITY_MULTIPLIERS = {
    'sedentary': 1.2,
    'light': 1.375,
    'moderate': 1.55,
    'active': 1.725,
    'veryActive': 1.9,
}

ACTIVITY_DESCRIPTIONS = {
    'sedentary': 'Sedentary (little or no exercise)',
    'light': 'Lightly active (light exercise/sports 1-3 days/week)',
    'moderate': 'Moderately active (moderate exercise/sports 3-5 days/week)',
    'active': 'Very active (hard exercise/sports 6-7 days a week)',
    'veryActive': 'Super active (very hard exercise/sports & physical job)',
}

CALORIE_ADJUSTMENT = 500
IMPERIAL_BMI_FACTOR = 703
LB_TO_KG = 0.453592
INCH_TO_CM = 2.54

MEASUREMENT_ERROR = "Please enter valid positive numbers for weight and height."


# holds every digit of a finite float
DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _round_half_up(value, places):
    """
    Rounds the shortest decimal repr of a float, so a value stored just below
    a half (0.15 is really 0.1499...) still rounds up to 0.2.
    """
    with localcontext(DECIMAL_CONTEXT):
        return Decimal(repr(value)).quantize(Decimal(places))


def _round_half_ceiling(value):
    return int((value + Decimal('0.5')).to_integral_value(rounding=ROUND_FLOOR))


def calculate_bmi(weight, height):
    """Calculates BMI given weight (kg) and height (cm)."""
    h_m = height / 100
    denominator = h_m * h_m
    if denominator == 0:
        raise InvalidInput(MEASUREMENT_ERROR)
    return weight / denominator


def calculate_bmi_imperial(weight, total_inches):
    """Calculates BMI given weight (lbs) and height (total inches)."""
    denominator = total_inches * total_inches
    if denominator == 0:
        raise InvalidInput(MEASUREMENT_ERROR)
    return IMPERIAL_BMI_FACTOR * weight / denominator


def get_bmi_category(bmi):
    """Returns the (label, class_name) band containing the unrounded BMI."""
    for upper, label, class_name in BMI_CATEGORIES:
        if bmi < upper:
            return label, class_name
    # non-finite BMI from overflowing inputs
    raise InvalidInput(MEASUREMENT_ERROR)


def get_bmi_details(bmi):
    label, class_name = get_bmi_category(bmi)
    return {
        'bmi': float(_round_half_up(bmi, '0.1')),
        'category': label,
        'class_name': class_name,
    }


def calculate_bmr(weight, height, age, gender):
    """
    Basal metabolic rate from the Mifflin-St Jeor equation.
    Weight in kg, height in cm.
    """
    bmr = (10 * weight) + (6.25 * height) - (5 * age)
    bmr += 5 if gender == 'male' else -161
    return bmr


def calculate_tdee(bmr, activity_level):
    return bmr * ACTIVITY_MULTIPLIERS[activity_level]


def calculate_calorie_targets(weight, height, age, gender, activity_level):
    """
    Daily calorie targets for each goal.
    All three values are rounded independently from the unrounded TDEE,
    half toward positive infinity, so the 500 kcal offsets survive rounding
    even when the TDEE is negative.
    """
    try:
        tdee = calculate_tdee(calculate_bmr(weight, height, age, gender), activity_level)
    except OverflowError:
        # age too large to convert to float
        raise InvalidInput("Please enter a valid age.")
    if not math.isfinite(tdee):
        raise InvalidInput(MEASUREMENT_ERROR)
    with localcontext(DECIMAL_CONTEXT):
        tdee = Decimal(repr(tdee))
        return {
            'maintenance': _round_half_ceiling(tdee),
            'lose': _round_half_ceiling(tdee - CALORIE_ADJUSTMENT),
            'gain': _round_half_ceiling(tdee + CALORIE_ADJUSTMENT),
        }


def select_target_calories(calories, goal):
    """Picks the precomputed value for a goal. Nothing is recalculated."""
    if not calories:
        return None
    return calories[goal]


def _read_measurements(inputs, unit):
    """Returns (bmi, weight_kg, height_cm) for the entered unit system."""
    if unit == 'metric':
        weight = InputValidator.parse_positive_number(inputs.get('weight'), MEASUREMENT_ERROR)
        height = InputValidator.parse_positive_number(inputs.get('height'), MEASUREMENT_ERROR)
        return calculate_bmi(weight, height), weight, height

    weight = InputValidator.parse_positive_number(inputs.get('weight'), MEASUREMENT_ERROR)
    feet = InputValidator.parse_number(inputs.get('feet'))
    inches = InputValidator.parse_number(inputs.get('inches'))
    if feet is None or inches is None or (feet <= 0 and inches <= 0):
        raise InvalidInput(MEASUREMENT_ERROR)

    total_inches = (feet * 12) + inches
    if total_inches <= 0:
        raise InvalidInput("Total height must be a positive number.")

    bmi = calculate_bmi_imperial(weight, total_inches)
    return bmi, weight * LB_TO_KG, total_inches * INCH_TO_CM


def calculate(inputs):
    """
    Validates raw form inputs and computes BMI and, when an age is given,
    the calorie targets.

    Raises InvalidInput with a displayable message on any bad field.
    """
    wants_calories = not InputValidator.is_blank(inputs.get('age'))
    age = InputValidator.parse_age(inputs.get('age')) if wants_calories else None

    unit = InputValidator.validate_choice(inputs.get('unit'), UNIT_SYSTEMS, 'unit system', DEFAULT_UNIT)
    gender = InputValidator.validate_choice(inputs.get('gender'), GENDERS, 'gender', DEFAULT_GENDER)
    activity_level = InputValidator.validate_choice(
        inputs.get('activity_level'), tuple(ACTIVITY_MULTIPLIERS), 'activity level', DEFAULT_ACTIVITY_LEVEL)
    goal = InputValidator.validate_choice(inputs.get('goal'), GOALS, 'goal', DEFAULT_GOAL)

    bmi, weight_kg, height_cm = _read_measurements(inputs, unit)

    result = get_bmi_details(bmi)
    calories = None
    if wants_calories:
        calories = calculate_calorie_targets(weight_kg, height_cm, age, gender, activity_level)

    result.update({
        'unit': unit,
        'calories': calories,
        'goal': goal,
        'target_calories': select_target_calories(calories, goal),
    })
    logger.debug("Calculated BMI %s (%s), calories %s", result['bmi'], result['category'], calories)
    return result
