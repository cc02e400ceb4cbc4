"""Ingredient name normalization.

Maps a raw ingredient name to the key used to merge shopping list rows, so
"猪肉丝" and "猪肉片" end up on one line as "猪肉".

Order matters:
  1. parenthetical asides are stripped first ("鸡胸肉（去皮）" -> "鸡胸肉"),
  2. NAME_RULES run in sequence; each rule only fires when its guard matches
     the name as left by the previous rules,
  3. INGREDIENT_ALIASES is consulted last.

normalize_name never raises: every string maps to exactly one key.
"""
import re
from typing import Callable, List, NamedTuple, Pattern

_FULLWIDTH_PARENS = re.compile(r'（.*?）')
_ASCII_PARENS = re.compile(r'\(.*?\)')

# Regional synonyms -> canonical term
INGREDIENT_ALIASES = {
    '西红柿': '番茄', '洋芋': '土豆', '马铃薯': '土豆',
    '卷心菜': '包菜', '洋白菜': '包菜', '圆白菜': '包菜',
    '青蒜': '蒜苗', '蒜头': '蒜',
    '生姜': '姜', '老姜': '姜', '嫩姜': '姜',
    '鸡蛋': '蛋', '鸡子': '蛋',
    '娃娃菜': '白菜',
    '西兰花': '花菜', '花椰菜': '花菜',
    '口蘑': '蘑菇', '香菇': '蘑菇',
}


class NameRule(NamedTuple):
    name: str
    guard: Pattern
    transform: Callable[[str], str]

    def apply(self, text: str) -> str:
        if self.guard.search(text):
            return self.transform(text)
        return text


def _replace_with(target: str) -> Callable[[str], str]:
    return lambda _text: target


def _strip_cut_marks(text: str) -> str:
    return re.sub(r'[丝末丁片块条馅]', '', text)


def _poultry(text: str) -> str:
    if '鸡胸肉' in text:
        return '鸡胸肉'
    if '鸡腿' in text:
        return '鸡腿'
    return '鸡肉'


def _stem_rule(name: str, stem: str, suffixes: str) -> NameRule:
    """Collapse ``stem`` followed by at most one cut suffix to the bare stem."""
    return NameRule(name, re.compile(rf'^{stem}[{suffixes}]?$'), _replace_with(stem))


def _exact_rule(name: str, variants: List[str], target: str) -> NameRule:
    return NameRule(name, re.compile(rf'^({"|".join(variants)})$'), _replace_with(target))


NAME_RULES: List[NameRule] = [
    # Red meat: drop every cut/preparation marker, e.g. 牛肉丝 -> 牛肉
    NameRule('red_meat_cuts', re.compile(r'^(猪|牛|羊)肉'), _strip_cut_marks),
    NameRule('pork_tenderloin', re.compile(r'^猪里脊肉$'), _replace_with('猪肉')),
    NameRule('minced_pork', re.compile(r'^猪肉馅$'), _replace_with('猪肉')),
    NameRule('pork_belly', re.compile(r'^五花肉$'), _replace_with('猪肉')),
    # Breast and thigh stay separate lines, any other chicken meat is 鸡肉
    NameRule('poultry', re.compile(r'^鸡.*肉'), _poultry),
    _exact_rule('scallion', ['大葱', '小葱', '香葱', '葱花', '葱段', '葱丝', '葱末'], '葱'),
    _exact_rule('ginger', ['生姜', '老姜', '姜片', '姜丝', '姜末'], '姜'),
    _exact_rule('garlic', ['大蒜', '蒜头', '蒜瓣', '蒜片', '蒜末', '蒜泥'], '蒜'),
    _stem_rule('green_pepper', '青椒', '丝末块条'),
    _stem_rule('red_pepper', '红椒', '丝末块条'),
    _stem_rule('potato', '土豆', '丝末块条片'),
    _stem_rule('carrot', '胡萝卜', '丝末块条片丁'),
    _stem_rule('shiitake', '香菇', '丝末块条片丁'),
]


def strip_annotations(raw_name: str) -> str:
    """Remove （...） and (...) asides and surrounding whitespace."""
    clean = _FULLWIDTH_PARENS.sub('', raw_name or '')
    clean = _ASCII_PARENS.sub('', clean)
    return clean.strip()


def apply_rules(name: str, rules: List[NameRule] = NAME_RULES) -> str:
    for rule in rules:
        name = rule.apply(name)
    return name


def normalize_name(raw_name: str) -> str:
    """Return the shopping list key for a raw ingredient name.

    Examples:
        >>> normalize_name("西红柿")
        '番茄'
        >>> normalize_name("猪肉丝")
        '猪肉'
        >>> normalize_name("鸡蛋（土鸡）")
        '蛋'
    """
    clean = apply_rules(strip_annotations(raw_name))
    return INGREDIENT_ALIASES.get(clean, clean)


__all__ = ['INGREDIENT_ALIASES', 'NAME_RULES', 'NameRule', 'apply_rules', 'normalize_name', 'strip_annotations']
