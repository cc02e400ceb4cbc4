import unittest
from mealcart.logic.shopping.normalizer import (
    INGREDIENT_ALIASES,
    NAME_RULES,
    apply_rules,
    normalize_name,
    strip_annotations,
)


class TestNormalizeName(unittest.TestCase):

    def test_alias_collapse(self):
        self.assertEqual(normalize_name("西红柿"), "番茄")
        self.assertEqual(normalize_name("番茄"), "番茄")
        self.assertEqual(normalize_name("鸡蛋（土鸡）"), "蛋")

    def test_meat_cut_suffixes(self):
        self.assertEqual(normalize_name("猪肉丝"), "猪肉")
        self.assertEqual(normalize_name("猪肉片"), "猪肉")
        self.assertEqual(normalize_name("牛肉块"), "牛肉")
        self.assertEqual(normalize_name("羊肉条"), "羊肉")

    def test_pork_overrides(self):
        for raw in ("猪里脊肉", "猪肉馅", "五花肉"):
            self.assertEqual(normalize_name(raw), "猪肉", raw)

    def test_poultry(self):
        self.assertEqual(normalize_name("鸡胸肉（去皮）"), "鸡胸肉")
        self.assertEqual(normalize_name("鸡胸肉丁"), "鸡胸肉")
        self.assertEqual(normalize_name("鸡腿肉"), "鸡腿")
        self.assertEqual(normalize_name("鸡翅肉"), "鸡肉")
        # no 肉 after 鸡 -> left to the alias table
        self.assertEqual(normalize_name("鸡蛋"), "蛋")

    def test_aromatics(self):
        for raw in ("大葱", "小葱", "葱花", "葱段"):
            self.assertEqual(normalize_name(raw), "葱", raw)
        for raw in ("生姜", "姜片", "姜末"):
            self.assertEqual(normalize_name(raw), "姜", raw)
        for raw in ("大蒜", "蒜瓣", "蒜末", "蒜泥"):
            self.assertEqual(normalize_name(raw), "蒜", raw)

    def test_vegetable_stems(self):
        self.assertEqual(normalize_name("青椒丝"), "青椒")
        self.assertEqual(normalize_name("红椒块"), "红椒")
        self.assertEqual(normalize_name("土豆片"), "土豆")
        self.assertEqual(normalize_name("胡萝卜丁"), "胡萝卜")
        # 香菇 is reduced by its stem rule and then aliased
        self.assertEqual(normalize_name("香菇片"), "蘑菇")

    def test_stem_rule_needs_full_match(self):
        self.assertEqual(normalize_name("土豆泥"), "土豆泥")
        self.assertEqual(normalize_name("青椒丝丝"), "青椒丝丝")

    def test_parentheses_and_whitespace(self):
        self.assertEqual(strip_annotations("  番茄(大) "), "番茄")
        self.assertEqual(strip_annotations("豆腐（北）（嫩）"), "豆腐")
        self.assertEqual(normalize_name(" 洋芋 (黄心) "), "土豆")

    def test_unknown_names_pass_through(self):
        self.assertEqual(normalize_name("三文鱼"), "三文鱼")
        self.assertEqual(normalize_name(""), "")
        self.assertEqual(normalize_name(None), "")

    def test_deterministic(self):
        names = ["猪肉丝", "西红柿", "鸡胸肉（去皮）", "葱花", "随便什么"]
        self.assertEqual([normalize_name(n) for n in names], [normalize_name(n) for n in names])


class TestNameRules(unittest.TestCase):

    def _rule(self, name):
        return next(r for r in NAME_RULES if r.name == name)

    def test_rules_fire_only_on_guard(self):
        rule = self._rule('red_meat_cuts')
        self.assertEqual(rule.apply("牛肉丝"), "牛肉")
        self.assertEqual(rule.apply("牛腩块"), "牛腩块")

    def test_scallion_rule_exact_match(self):
        rule = self._rule('scallion')
        self.assertEqual(rule.apply("葱花"), "葱")
        self.assertEqual(rule.apply("葱油饼"), "葱油饼")

    def test_apply_rules_subset(self):
        rules = [self._rule('potato')]
        self.assertEqual(apply_rules("土豆丝", rules), "土豆")
        self.assertEqual(apply_rules("猪肉丝", rules), "猪肉丝")

    def test_alias_applied_after_rules(self):
        self.assertNotIn("土豆丝", INGREDIENT_ALIASES)
        self.assertEqual(apply_rules("马铃薯"), "马铃薯")
        self.assertEqual(normalize_name("马铃薯"), "土豆")


if __name__ == '__main__':
    unittest.main()
