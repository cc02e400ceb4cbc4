from typing import Final

ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"
SNAPSHOT_VERSION: Final[str] = "1.0"
EXPORT_FILENAME_TEMPLATE: Final[str] = "family-dinner-data-{date}.json"

# Only fresh goods end up on the shopping list; pantry staples are assumed on hand.
FRESH_CATEGORIES: Final[tuple[str, ...]] = ("produce", "meat", "seafood", "dairy")
SHOPPING_CATEGORY_LABELS: Final[dict[str, str]] = {
    "produce": "🥦 蔬菜水果",
    "meat": "🥩 肉禽蛋品",
    "seafood": "🐟 海鲜水产",
    "dairy": "🥛 乳制品/冷藏",
}
DETAILS_SEPARATOR: Final[str] = " + "

RECIPE_CATEGORIES: Final[tuple[str, ...]] = ("蔬菜", "肉类", "海鲜", "菌类", "主食", "汤品", "其他")
DEFAULT_RECIPE_CATEGORY: Final[str] = "其他"

WEEKDAY_LABELS: Final[tuple[str, ...]] = ("一", "二", "三", "四", "五", "六", "日")
AUTO_PLAN_RECIPES_PER_DAY: Final[int] = 2

# Category filter value that matches every recipe
ALL_CATEGORIES: Final[str] = "全部"
