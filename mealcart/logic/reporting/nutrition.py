"""Calorie and cost aggregation over planned meals.

Planned ids without a matching recipe are ignored everywhere except the
meal counter of compute_year_overview, which counts what was planned.
"""
from datetime import date, datetime
from typing import Any, Dict, List

from mealcart.domain.Plan import Plan, month_days, week_range
from mealcart.domain.Recipe import Recipe, index_by_id
from mealcart.utilities.constants import ISO_DATE_FORMAT, WEEKDAY_LABELS

PERIOD_MODES = ("week", "month", "year")


def _parse_day(day: str):
    try:
        return datetime.strptime(day, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None


def _resolve(plan: Plan, catalog: Dict[str, Recipe], day: str) -> List[Recipe]:
    return [catalog[rid] for rid in plan.recipes_for(day) if rid in catalog]


def _calories(recipes: List[Recipe]):
    return sum(r.calories or 0 for r in recipes)


def _cost(recipes: List[Recipe]):
    return sum(r.price or 0 for r in recipes)


def _week_title(days: List[str]) -> str:
    start, end = _parse_day(days[0]), _parse_day(days[-1])
    return f"{start.month}月{start.day}日 - {end.month}月{end.day}日"


def compute_day_summary(plan: Plan, recipes: List[Recipe], day: str) -> Dict[str, Any]:
    """Recipes, calories and estimated cost planned for a single ISO date."""
    planned = _resolve(plan, index_by_id(recipes), day)
    return {
        'date': day,
        'recipes': [r.id for r in planned],
        'calories': _calories(planned),
        'cost': _cost(planned),
    }


def compute_period_stats(plan: Plan, recipes: List[Recipe], mode: str = "week", anchor: date = None) -> Dict[str, Any]:
    """Aggregate calories/cost for the week, month or year containing ``anchor``.

    Returns structure:
    {
      'mode': 'week', 'title': str, 'period': [start, end],
      'recipes': [recipe ids in plan order],
      'chart': [{'name': label, 'calories': n}, ...],
      'total_calories': n, 'total_price': n, 'meal_count': int
    }
    """
    if mode not in PERIOD_MODES:
        raise ValueError(f"Unknown stats mode: {mode}")
    anchor = anchor or date.today()
    catalog = index_by_id(recipes)
    relevant: List[Recipe] = []
    chart = []

    if mode == "week":
        days = week_range(anchor)
        title = _week_title(days)
        for label, day in zip(WEEKDAY_LABELS, days):
            planned = _resolve(plan, catalog, day)
            relevant.extend(planned)
            chart.append({'name': label, 'calories': _calories(planned)})
        period = [days[0], days[-1]]
    elif mode == "month":
        days = month_days(anchor)
        title = f"{anchor.year}年 {anchor.month}月"
        for day in days:
            planned = _resolve(plan, catalog, day)
            relevant.extend(planned)
            chart.append({'name': str(_parse_day(day).day), 'calories': _calories(planned)})
        period = [days[0], days[-1]]
    else:
        title = f"{anchor.year}年"
        monthly = [0] * 12
        for day in plan.sorted_dates():
            d = _parse_day(day)
            if d is None or d.year != anchor.year:
                continue
            planned = _resolve(plan, catalog, day)
            relevant.extend(planned)
            monthly[d.month - 1] += _calories(planned)
        chart = [{'name': f"{i + 1}月", 'calories': cals} for i, cals in enumerate(monthly)]
        period = [f"{anchor.year}-01-01", f"{anchor.year}-12-31"]

    return {
        'mode': mode,
        'title': title,
        'period': period,
        'recipes': [r.id for r in relevant],
        'chart': chart,
        'total_calories': _calories(relevant),
        'total_price': _cost(relevant),
        'meal_count': len(relevant),
    }


def compute_year_overview(plan: Plan, recipes: List[Recipe], year: int) -> List[Dict[str, Any]]:
    """Meals planned and their cost for each month of ``year``."""
    catalog = index_by_id(recipes)
    months = [{'name': f"{m}月", 'meals': 0, 'cost': 0} for m in range(1, 13)]
    for day in plan.sorted_dates():
        d = _parse_day(day)
        if d is None or d.year != year:
            continue
        entry = months[d.month - 1]
        entry['meals'] += len(plan.recipes_for(day))
        entry['cost'] += _cost(_resolve(plan, catalog, day))
    return months


__all__ = ["PERIOD_MODES", "compute_day_summary", "compute_period_stats", "compute_year_overview"]
