import unittest
from mealcart.domain.Ingredient import Ingredient
from mealcart.domain.Recipe import Recipe
from mealcart.logic.catalog.search import all_tags, filter_recipes


class TestFilterRecipes(unittest.TestCase):

    def setUp(self):
        self.recipes = [
            Recipe(id="1", title="Caesar 沙拉", cook_time=10, calories=250, price=15, category="蔬菜",
                   tags=["快手", "清淡"], ingredients=[Ingredient("生菜"), Ingredient("Parmesan")]),
            Recipe(id="2", title="红烧排骨", cook_time=45, calories=600, price=50, category="肉类",
                   tags=["下饭", "快手"], ingredients=[Ingredient("排骨"), Ingredient("生姜")]),
            Recipe(id="3", title="佛跳墙", cook_time=240, calories=900, price=300, category="汤品",
                   tags=["宴客"], ingredients=[Ingredient("鲍鱼"), Ingredient("花胶")]),
        ]

    def _ids(self, **kwargs):
        return [r.id for r in filter_recipes(self.recipes, **kwargs)]

    def test_no_filters_keeps_catalog_order(self):
        self.assertEqual(self._ids(), ["1", "2", "3"])

    def test_search_title_ignores_case(self):
        self.assertEqual(self._ids(search="caesar"), ["1"])

    def test_search_ingredient_name(self):
        self.assertEqual(self._ids(search="生姜"), ["2"])
        # ingredient names match as typed
        self.assertEqual(self._ids(search="parmesan"), [])
        self.assertEqual(self._ids(search="Parmesan"), ["1"])

    def test_category(self):
        self.assertEqual(self._ids(category="肉类"), ["2"])
        self.assertEqual(self._ids(category="全部"), ["1", "2", "3"])
        self.assertEqual(self._ids(category="海鲜"), [])

    def test_bucket_bounds_are_inclusive_on_top(self):
        self.assertEqual(self._ids(time="fast"), ["1"])
        self.assertEqual(self._ids(time="medium"), ["2"])
        self.assertEqual(self._ids(time="slow"), ["3"])
        self.assertEqual(self._ids(calories="low"), ["1"])
        self.assertEqual(self._ids(calories="medium"), ["2"])
        self.assertEqual(self._ids(calories="high"), ["3"])
        self.assertEqual(self._ids(price="cheap"), ["1"])
        self.assertEqual(self._ids(price="moderate"), ["2"])
        self.assertEqual(self._ids(price="expensive"), ["3"])

    def test_tags_require_all(self):
        self.assertEqual(self._ids(tags=["快手"]), ["1", "2"])
        self.assertEqual(self._ids(tags=["快手", "下饭"]), ["2"])
        self.assertEqual(self._ids(tags=["快手", "宴客"]), [])

    def test_filters_combine(self):
        self.assertEqual(self._ids(search="排骨", price="cheap"), [])
        self.assertEqual(self._ids(tags=["快手"], calories="low"), ["1"])

    def test_unknown_bucket(self):
        with self.assertRaises(KeyError):
            filter_recipes(self.recipes, time="instant")

    def test_all_tags_sorted_unique(self):
        self.assertEqual(all_tags(self.recipes), sorted({"快手", "清淡", "下饭", "宴客"}))
        self.assertEqual(all_tags([]), [])


if __name__ == '__main__':
    unittest.main()
