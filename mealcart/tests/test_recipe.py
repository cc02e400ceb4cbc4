import unittest
from mealcart.domain.AppData import AppData
from mealcart.domain.Ingredient import Ingredient
from mealcart.domain.Recipe import Recipe
from mealcart.domain.ShoppingList import DailyShoppingList, ShoppingItem


class TestRecipe(unittest.TestCase):

    def test_from_dict_camel_case(self):
        recipe = Recipe.from_dict({
            "id": 7,
            "title": "麻婆豆腐",
            "cookTime": 20,
            "timesCooked": 3,
            "lastCooked": "2024-05-01",
            "ingredients": [{"name": "豆腐", "amount": 1, "unit": "块", "category": "produce"}, {"name": "花椒"}],
        })
        self.assertEqual(recipe.id, "7")
        self.assertEqual(recipe.cook_time, 20)
        self.assertEqual(recipe.category, "其他")
        self.assertEqual(recipe.ingredients[0], Ingredient("豆腐", "1", "块", "produce"))
        self.assertEqual(recipe.ingredients[1].category, "other")
        data = recipe.to_dict()
        self.assertEqual(data["timesCooked"], 3)
        self.assertEqual(data["lastCooked"], "2024-05-01")

    def test_ingredients_are_immutable(self):
        recipe = Recipe(id="1", ingredients=[Ingredient("葱")])
        self.assertIsInstance(recipe.ingredients, tuple)
        with self.assertRaises(AttributeError):
            recipe.ingredients[0].name = "姜"

    def test_app_data_defaults(self):
        data = AppData.from_dict({})
        self.assertEqual(data.version, "1.0")
        self.assertIsNone(data.preferences)
        self.assertEqual(data.to_dict()["preferences"]["id"], "default")


class TestShoppingItem(unittest.TestCase):

    def test_dict_and_copy(self):
        item = ShoppingItem.from_dict({"name": "葱", "details": "1根", "category": "produce", "checked": 1})
        self.assertTrue(item.checked)
        clone = item.copy()
        clone.checked = False
        self.assertTrue(item.checked)
        self.assertNotEqual(item, clone)

    def test_daily_find(self):
        day = DailyShoppingList("2024-05-06", [ShoppingItem("葱"), ShoppingItem("姜")])
        self.assertEqual(day.find("姜").name, "姜")
        self.assertIsNone(day.find("蒜"))
        self.assertEqual(day.to_dict()["date"], "2024-05-06")


if __name__ == '__main__':
    unittest.main()
