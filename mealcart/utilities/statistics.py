"""
Statistics and Analytics module for mealcart.
Provides insights into planning habits, calories and cost.
"""
from collections import Counter
from datetime import date, datetime
from typing import Dict, List, Tuple
import json
from pathlib import Path
import logging

from mealcart.domain.Recipe import index_by_id
from mealcart.infra.Snapshot_Repository import SnapshotRepository
from mealcart.logic.reporting.nutrition import compute_period_stats

logger = logging.getLogger(__name__)


class MealPlannerStats:
    """Generate statistics and insights from the saved snapshot."""

    def __init__(self, repository: SnapshotRepository):
        self.repository = repository

    def _load(self):
        return self.repository.load()

    def most_planned_recipes(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Get the most frequently planned recipes as (title, count)."""
        data = self._load()
        catalog = index_by_id(data.recipes)
        counter = Counter()
        for day in data.plan.sorted_dates():
            for rid in data.plan.recipes_for(day):
                if rid in catalog:
                    counter[catalog[rid].title] += 1
        return counter.most_common(limit)

    def recipe_category_distribution(self) -> Dict[str, int]:
        """Get distribution of recipe categories (蔬菜, 肉类, ...)."""
        counter = Counter(r.category for r in self._load().recipes)
        return dict(counter.most_common())

    def recipe_tags_distribution(self) -> Dict[str, int]:
        """Get distribution of recipe tags."""
        tag_counter = Counter()
        for recipe in self._load().recipes:
            for tag in recipe.tags:
                tag_counter[tag] += 1
        return dict(tag_counter.most_common())

    def unplanned_recipes(self) -> List[str]:
        """Find recipes that never appear in the plan."""
        data = self._load()
        planned = {rid for ids in data.plan.meals.values() for rid in ids}
        return sorted(r.title for r in data.recipes if r.id not in planned)

    def meal_diversity_score(self) -> float:
        """
        Calculate meal diversity score (0-100).
        Higher score = more variety in planned meals.
        """
        data = self._load()
        catalog = index_by_id(data.recipes)
        planned = [rid for ids in data.plan.meals.values() for rid in ids if rid in catalog]
        if not planned:
            return 0.0
        return round(len(set(planned)) / len(planned) * 100, 2)

    def generate_report(self, anchor: date = None) -> Dict:
        """Generate comprehensive statistics report."""
        anchor = anchor or date.today()
        data = self._load()
        return {
            'week': compute_period_stats(data.plan, data.recipes, 'week', anchor),
            'month': compute_period_stats(data.plan, data.recipes, 'month', anchor),
            'year': compute_period_stats(data.plan, data.recipes, 'year', anchor),
            'most_planned': self.most_planned_recipes(10),
            'category_distribution': self.recipe_category_distribution(),
            'tag_distribution': self.recipe_tags_distribution(),
            'unplanned_recipes': self.unplanned_recipes(),
            'diversity_score': self.meal_diversity_score(),
            'generated_at': datetime.now().isoformat()
        }

    def print_report(self):
        """Print a formatted statistics report."""
        report = self.generate_report()

        print("\n" + "="*60)
        print("📊 MEAL PLAN STATISTICS REPORT")
        print("="*60)

        for mode in ('week', 'month', 'year'):
            stats = report[mode]
            print(f"\n📅 {stats['title']}:")
            print(f"  Meals:    {stats['meal_count']}")
            print(f"  Calories: {stats['total_calories']} kcal")
            print(f"  Budget:   ¥{stats['total_price']}")

        print("\n🏆 TOP 10 MOST PLANNED RECIPES:")
        for i, (recipe, count) in enumerate(report['most_planned'], 1):
            print(f"  {i}. {recipe}: {count} times")

        print("\n🏷️  RECIPE CATEGORIES:")
        for category, count in report['category_distribution'].items():
            print(f"  {category}: {count}")

        print(f"\n🍽️  DIVERSITY SCORE: {report['diversity_score']:.1f}/100")

        unplanned = report['unplanned_recipes']
        if unplanned:
            print(f"\n💤 UNPLANNED RECIPES ({len(unplanned)}):")
            for recipe in unplanned[:10]:
                print(f"  - {recipe}")
            if len(unplanned) > 10:
                print(f"  ... and {len(unplanned) - 10} more")

        print("\n" + "="*60)
        print(f"Report generated: {report['generated_at']}")
        print("="*60 + "\n")


# CLI interface
if __name__ == "__main__":
    from mealcart.infra.paths import SNAPSHOT_FILE

    stats = MealPlannerStats(SnapshotRepository(SNAPSHOT_FILE))
    stats.print_report()

    # Save JSON report
    report = stats.generate_report()
    output_file = Path("meal_plan_stats.json")
    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
    print(f"✓ Detailed report saved to: {output_file}")
