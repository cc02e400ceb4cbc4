import unittest
from mealcart.domain.ShoppingList import ShoppingItem
from mealcart.infra.pdf_utils import generate_pdf_for_shopping_list


class TestShoppingListPdf(unittest.TestCase):

    def test_pdf_bytes(self):
        items = [
            ShoppingItem("猪肉", "300g", "meat"),
            ShoppingItem("葱", "1根 + 适量", "produce", True),
            ShoppingItem("牛奶", "250ml", "dairy"),
        ]
        pdf = generate_pdf_for_shopping_list(items)
        self.assertTrue(pdf.startswith(b"%PDF"))
        self.assertGreater(len(pdf), 500)

    def test_empty_list_still_renders(self):
        self.assertTrue(generate_pdf_for_shopping_list([], title="本周采买").startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
