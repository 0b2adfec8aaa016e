from core.calculator import calculate
from core.input_validator import InvalidInput
from core.response_formatter import format_bmi_card, format_calorie_card, format_result, format_error


class TestResultCards:
    def test_bmi_card(self, metric_profile):
        html = format_bmi_card(calculate(metric_profile))
        assert '22.9' in html
        assert 'Normal weight' in html
        assert 'text-green-400' in html

    def test_bmi_card_keeps_one_decimal(self):
        result = {'bmi': 25.0, 'category': 'Overweight', 'class_name': 'text-yellow-400'}
        assert '25.0' in format_bmi_card(result)

    def test_calorie_card_highlights_goal(self):
        calories = {'maintenance': 2009, 'lose': 1509, 'gain': 2509}
        html = format_calorie_card(calories, 'lose')
        assert 'data-target-calories>1509<' in html
        assert 'data-goal="lose" class="goal-option rounded-full border-2 border-primary' in html
        assert '2009 kcal/day' in html
        assert '2509 kcal/day' in html

    def test_calorie_card_empty_without_calories(self):
        assert format_calorie_card(None, 'maintain') == ""

    def test_format_result_bmi_only(self):
        html = format_result(calculate({'weight': '70', 'height': '175'}))
        assert 'Your BMI Result' in html
        assert 'Daily Calorie Needs' not in html


def test_format_error_escapes_message():
    html = format_error(InvalidInput('<script>alert(1)</script>'))
    assert '<script>' not in html
    assert '&lt;script&gt;' in html
    assert 'Invalid Input' in html
