import threading
import unittest
from mealcart.domain.Ingredient import Ingredient
from mealcart.domain.Plan import Plan
from mealcart.domain.Recipe import Recipe
from mealcart.events.Event_Bus import CATALOG_CHANGED, PLAN_CHANGED, SHOPPING_UPDATED, EventBus
from mealcart.events.shopping_observers import ShoppingListStore, start


RECIPES = [
    Recipe(id="r1", title="葱爆羊肉", ingredients=[
        Ingredient("羊肉片", "300", "g", "meat"),
        Ingredient("大葱", "1", "根", "produce"),
    ]),
    Recipe(id="r2", title="番茄炒蛋", ingredients=[
        Ingredient("西红柿", "2", "个", "produce"),
        Ingredient("鸡蛋", "3", "个", "meat"),
        Ingredient("葱花", "适量", "", "produce"),
    ]),
]


class TestShoppingListStore(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.store = ShoppingListStore(self.bus)
        start(self.store, self.bus)
        self.plan = Plan({"2024-05-06": ["r1"]})

    def test_rebuilds_on_plan_changed(self):
        self.bus.publish(PLAN_CHANGED, {'plan': self.plan, 'recipes': RECIPES})
        weekly, daily = self.store.snapshot()
        self.assertEqual(sorted(i.name for i in weekly), ["羊肉", "葱"])
        self.assertEqual(len(daily), 1)

    def test_rebuilds_on_catalog_changed(self):
        self.bus.publish(CATALOG_CHANGED, {'plan': self.plan, 'recipes': []})
        self.assertEqual(self.store.snapshot().weekly, [])

    def test_weekly_checked_survives_rebuild(self):
        self.store.recompute(self.plan, RECIPES)
        self.assertTrue(self.store.toggle("葱").checked)

        self.plan.add_recipe("2024-05-07", "r2")
        self.bus.publish(PLAN_CHANGED, {'plan': self.plan, 'recipes': RECIPES})
        rows = {i.name: i for i in self.store.snapshot().weekly}
        self.assertTrue(rows["葱"].checked)
        self.assertEqual(rows["葱"].details, "1根 + 适量")
        self.assertFalse(rows["番茄"].checked)

    def test_daily_checked_reset_on_rebuild(self):
        self.store.recompute(self.plan, RECIPES)
        toggled = self.store.toggle("葱", "2024-05-06")
        self.assertTrue(toggled.checked)
        # the weekly row is independent of the daily one
        self.assertFalse(self.store.snapshot().weekly[-1].checked)

        self.store.recompute(self.plan, RECIPES)
        day = self.store.snapshot().daily[0]
        self.assertFalse(day.find("葱").checked)

    def test_toggle_unknown(self):
        self.store.recompute(self.plan, RECIPES)
        self.assertIsNone(self.store.toggle("三文鱼"))
        self.assertIsNone(self.store.toggle("葱", "2030-01-01"))

    def test_toggle_twice_unchecks(self):
        self.store.recompute(self.plan, RECIPES)
        self.store.toggle("羊肉")
        self.assertFalse(self.store.toggle("羊肉").checked)

    def test_snapshot_is_a_copy(self):
        self.store.recompute(self.plan, RECIPES)
        self.store.snapshot().weekly[0].checked = True
        self.assertFalse(self.store.snapshot().weekly[0].checked)

    def test_publishes_shopping_updated(self):
        received = []
        self.bus.subscribe(SHOPPING_UPDATED, lambda name, payload: received.append(payload))
        self.store.recompute(self.plan, RECIPES)
        self.assertEqual(received, [{'weekly': 2, 'daily': 1}])

    def test_ignores_payload_without_plan(self):
        self.store.recompute(self.plan, RECIPES)
        self.bus.publish(PLAN_CHANGED, None)
        self.assertEqual(len(self.store.snapshot().weekly), 2)

    def test_to_dict(self):
        self.store.recompute(self.plan, RECIPES)
        data = self.store.to_dict()
        self.assertEqual(data['daily'][0]['date'], "2024-05-06")
        self.assertEqual({r['name'] for r in data['weekly']}, {"羊肉", "葱"})

    def test_concurrent_recompute_is_consistent(self):
        plans = [Plan({"2024-05-06": ["r1"]}), Plan({"2024-05-06": ["r1"], "2024-05-07": ["r2"]})]

        def worker(plan):
            for _ in range(20):
                self.store.recompute(plan, RECIPES)

        threads = [threading.Thread(target=worker, args=(p,)) for p in plans]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        weekly, daily = self.store.snapshot()
        # weekly and daily always come from the same pass
        self.assertIn((len(weekly), len(daily)), [(2, 1), (4, 2)])


class TestEventBus(unittest.TestCase):

    def test_failing_subscriber_does_not_block_others(self):
        bus = EventBus()
        seen = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe(PLAN_CHANGED, broken)
        bus.subscribe(PLAN_CHANGED, lambda name, payload: seen.append(name))
        with self.assertLogs('mealcart.events.Event_Bus', level='ERROR'):
            bus.publish(PLAN_CHANGED, {})
        self.assertEqual(seen, [PLAN_CHANGED])

    def test_subscribe_once_and_unsubscribe(self):
        bus = EventBus()
        seen = []
        callback = lambda name, payload: seen.append(payload)
        bus.subscribe(CATALOG_CHANGED, callback)
        bus.subscribe(CATALOG_CHANGED, callback)
        bus.publish(CATALOG_CHANGED, 1)
        bus.unsubscribe(CATALOG_CHANGED, callback)
        bus.unsubscribe(CATALOG_CHANGED, callback)
        bus.publish(CATALOG_CHANGED, 2)
        self.assertEqual(seen, [1])


if __name__ == '__main__':
    unittest.main()
