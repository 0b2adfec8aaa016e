from config.security import sanitize_html_output

GOAL_LABELS = {
    'lose': 'Lose Weight',
    'maintain': 'Maintain',
    'gain': 'Gain Weight',
}


def format_bmi_card(result):
    """
    Generates the HTML result panel for a BMI calculation.
    """
    return f"""
    <div class="bmi-card mt-6 rounded-2xl border border-white/20 bg-white/10 p-5 text-white shadow-lg">
        <h3 class="font-bold text-lg mb-3">Your BMI Result</h3>
        <div class="text-center">
            <p class="text-6xl font-bold">{result['bmi']:.1f}</p>
            <p class="text-lg font-semibold mt-2 {result['class_name']}">{sanitize_html_output(result['category'])}</p>
        </div>
    </div>
    """


def format_calorie_card(calories, goal):
    """
    Generates the daily calorie panel. The goal only decides which of the
    precomputed values is highlighted.
    """
    if not calories:
        return ""

    target = calories[goal]
    options = ""
    for key, label in GOAL_LABELS.items():
        active = "border-primary" if key == goal else "border-white/20"
        options += f"""
            <button type="button" data-goal="{key}" class="goal-option rounded-full border-2 {active} p-4">{label}</button>"""

    return f"""
    <div class="calorie-card mt-6 rounded-2xl border border-white/20 bg-white/10 p-5 text-white shadow-lg">
        <h3 class="font-bold text-lg"><i class="fas fa-fire"></i> Daily Calorie Needs</h3>
        <p class="text-gray-300 text-sm mb-4">Choose a goal to see your recommended daily calorie intake. This is an estimate.</p>
        <div class="grid grid-cols-3 gap-4 mb-4">{options}
        </div>
        <div class="text-center bg-black/20 p-4 rounded-lg">
            <p class="text-sm text-gray-300">Your suggested daily calorie intake is</p>
            <p class="text-4xl font-bold text-primary" data-target-calories>{target}</p>
            <p class="text-sm text-gray-300">calories/day</p>
        </div>
        <div class="mt-4 text-xs text-gray-400 space-y-2">
            <p><span class="font-semibold text-gray-300">Maintenance:</span> {calories['maintenance']} kcal/day is the amount of calories required to maintain your current weight.</p>
            <p><span class="font-semibold text-gray-300">Calorie Deficit (for weight loss):</span> A deficit of 500 kcal/day, like the suggested {calories['lose']} kcal/day, is generally recommended for sustainable weight loss of about 1 lb (0.5 kg) per week.</p>
            <p><span class="font-semibold text-gray-300">Calorie Surplus (for weight gain):</span> A surplus of 500 kcal/day, like the suggested {calories['gain']} kcal/day, can help in gaining weight, primarily muscle mass when combined with strength training.</p>
        </div>
    </div>
    """


def format_result(result):
    return format_bmi_card(result) + format_calorie_card(result.get('calories'), result.get('goal', 'maintain'))


def format_error(error):
    """Notification box for an InvalidInput."""
    return (
        "<div class='error-card rounded-xl border border-red-400 bg-red-500/20 p-4 text-white'>"
        f"<b>{sanitize_html_output(error.title)}:</b> {sanitize_html_output(error.message)}"
        "</div>"
    )
