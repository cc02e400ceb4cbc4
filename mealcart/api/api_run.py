from fastapi import (
    FastAPI,
    Query,
    APIRouter,
    Depends,
    HTTPException,
    Response,
    Body
)
from fastapi.responses import JSONResponse

from datetime import datetime, date as _date
from typing import List, Optional
import logging
import random

from pydantic import ValidationError

from mealcart.events.Event_Bus import GLOBAL_EVENT_BUS, PLAN_CHANGED, CATALOG_CHANGED, EventBus
from mealcart.events.shopping_observers import STORE, ShoppingListStore, start as start_shopping_observers
from mealcart.infra.Snapshot_Repository import SnapshotRepository
from mealcart.infra.paths import BACKUP_DIR, SNAPSHOT_FILE
from mealcart.infra.pdf_utils import generate_pdf_for_shopping_list
from mealcart.domain.Recipe import index_by_id
from mealcart.logic.catalog.search import all_tags, filter_recipes
from mealcart.logic.planning.auto_plan import auto_plan_week
from mealcart.logic.reporting.nutrition import (
    PERIOD_MODES,
    compute_day_summary,
    compute_period_stats,
    compute_year_overview,
)
from mealcart.logic.shopping.list_builder import group_by_category, pending_count
from mealcart.utilities.backup import BackupManager
from mealcart.utilities.config import BACKUP_KEEP
from mealcart.utilities.constants import ALL_CATEGORIES, EXPORT_FILENAME_TEMPLATE, ISO_DATE_FORMAT
from mealcart.utilities.export_import import DataImporter, parse_snapshot
from mealcart.utilities.validators import AutoPlanInput, PlanEntryInput, ToggleInput

# Logging
logger = logging.getLogger("mealcart_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Plan & Shopping List API")
router = APIRouter()


# -------------------- Dependencies --------------------
def get_repository() -> SnapshotRepository:
    return SnapshotRepository(SNAPSHOT_FILE)


def get_store() -> ShoppingListStore:
    return STORE


def get_bus() -> EventBus:
    return GLOBAL_EVENT_BUS


@app.on_event("startup")
def _startup_shopping_observers():
    """Subscribe the shopping list store and build the first lists from disk."""
    start_shopping_observers()
    data = get_repository().load()
    GLOBAL_EVENT_BUS.publish(CATALOG_CHANGED, {'plan': data.plan, 'recipes': data.recipes})
    logger.info("Shopping list store started with %s recipes", len(data.recipes))


# -------------------- Helpers --------------------
def _parse_iso(day: Optional[str]) -> _date:
    if day is None:
        return _date.today()
    try:
        return datetime.strptime(day, ISO_DATE_FORMAT).date()
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date '{day}', expected YYYY-MM-DD")


def _notify(bus: EventBus, event_name: str, data):
    bus.publish(event_name, {'plan': data.plan, 'recipes': data.recipes})


# -------------------- API: Shopping List --------------------
@router.get('/api/shopping-list')
def api_shopping_list(store: ShoppingListStore = Depends(get_store)):
    weekly, _daily = store.snapshot()
    return {
        "items": [i.to_dict() for i in weekly],
        "count": len(weekly),
        "pending": pending_count(weekly),
    }


@router.get('/api/shopping-list/daily')
def api_shopping_list_daily(store: ShoppingListStore = Depends(get_store)):
    _weekly, daily = store.snapshot()
    return {"days": [d.to_dict() for d in daily], "count": len(daily)}


def _groups_to_dict(items):
    return [
        {"category": category, "label": label, "items": [i.to_dict() for i in rows]}
        for category, label, rows in group_by_category(items)
    ]


@router.get('/api/shopping-list/grouped')
def api_shopping_list_grouped(mode: str = Query(default="weekly", pattern="^(weekly|daily)$"),
                              store: ShoppingListStore = Depends(get_store)):
    weekly, daily = store.snapshot()
    if mode == "weekly":
        return {"mode": mode, "groups": _groups_to_dict(weekly)}
    return {"mode": mode, "days": [{"date": d.date, "groups": _groups_to_dict(d.items)} for d in daily]}


@router.post('/api/shopping-list/toggle')
def api_shopping_list_toggle(payload: ToggleInput, store: ShoppingListStore = Depends(get_store)):
    item = store.toggle(payload.name, payload.date)
    if item is None:
        raise HTTPException(status_code=404, detail=f"'{payload.name}' is not on the shopping list")
    logger.info("Shopping item toggled name=%s date=%s checked=%s", payload.name, payload.date, item.checked)
    return item.to_dict()


@router.post('/api/shopping-list/refresh')
def api_shopping_list_refresh(repo: SnapshotRepository = Depends(get_repository),
                              bus: EventBus = Depends(get_bus),
                              store: ShoppingListStore = Depends(get_store)):
    _notify(bus, CATALOG_CHANGED, repo.load())
    weekly, daily = store.snapshot()
    return {"count": len(weekly), "days": len(daily)}


@router.get('/api/shopping-list/pdf')
def api_shopping_list_pdf(store: ShoppingListStore = Depends(get_store)):
    weekly, _daily = store.snapshot()
    pdf = generate_pdf_for_shopping_list(weekly)
    filename = f"shopping-list-{_date.today().isoformat()}.pdf"
    return Response(content=pdf, media_type="application/pdf",
                    headers={"Content-Disposition": f'attachment; filename="{filename}"'})


# -------------------- API: Recipes --------------------
@router.get('/api/recipes')
def api_recipes(q: str = Query(default=""),
                category: str = Query(default=ALL_CATEGORIES),
                time: str = Query(default="all", pattern="^(all|fast|medium|slow)$"),
                calories: str = Query(default="all", pattern="^(all|low|medium|high)$"),
                price: str = Query(default="all", pattern="^(all|cheap|moderate|expensive)$"),
                tags: List[str] = Query(default=[]),
                repo: SnapshotRepository = Depends(get_repository)):
    recipes = repo.load().recipes
    found = filter_recipes(recipes, q, category, time, calories, price, tags)
    return {
        "recipes": [r.to_dict() for r in found],
        "count": len(found),
        "tags": all_tags(recipes),
    }


# -------------------- API: Plan --------------------
@router.get('/api/plan')
def api_plan(start: Optional[str] = Query(default=None), end: Optional[str] = Query(default=None),
             repo: SnapshotRepository = Depends(get_repository)):
    plan = repo.load().plan
    meals = plan.to_dict()
    if start:
        meals = {d: ids for d, ids in meals.items() if d >= _parse_iso(start).isoformat()}
    if end:
        meals = {d: ids for d, ids in meals.items() if d <= _parse_iso(end).isoformat()}
    return {"plan": dict(sorted(meals.items()))}


@router.post('/api/plan/auto')
def api_plan_auto(payload: Optional[AutoPlanInput] = None,
                  repo: SnapshotRepository = Depends(get_repository),
                  bus: EventBus = Depends(get_bus)):
    payload = payload or AutoPlanInput()
    data = repo.load()
    if not data.recipes:
        raise HTTPException(status_code=400, detail="Add some recipes first")
    rng = random.Random(payload.seed) if payload.seed is not None else None
    days = auto_plan_week(data.plan, data.recipes, _parse_iso(payload.anchor), payload.per_day, rng)
    repo.save(data)
    _notify(bus, PLAN_CHANGED, data)
    return {"days": days, "plan": {d: data.plan.recipes_for(d) for d in days}}


@router.post('/api/plan/{day}')
def api_plan_add(day: str, payload: PlanEntryInput,
                 repo: SnapshotRepository = Depends(get_repository),
                 bus: EventBus = Depends(get_bus)):
    _parse_iso(day)
    data = repo.load()
    if payload.recipe_id not in index_by_id(data.recipes):
        raise HTTPException(status_code=404, detail=f"Unknown recipe '{payload.recipe_id}'")
    if not data.plan.add_recipe(day, payload.recipe_id):
        raise HTTPException(status_code=409, detail="Recipe is already on this day's menu")
    repo.save(data)
    _notify(bus, PLAN_CHANGED, data)
    return {"date": day, "recipes": data.plan.recipes_for(day)}


@router.delete('/api/plan/{day}/{recipe_id}')
def api_plan_remove(day: str, recipe_id: str,
                    repo: SnapshotRepository = Depends(get_repository),
                    bus: EventBus = Depends(get_bus)):
    _parse_iso(day)
    data = repo.load()
    if not data.plan.remove_recipe(day, recipe_id):
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe_id}' is not planned on {day}")
    repo.save(data)
    _notify(bus, PLAN_CHANGED, data)
    return {"date": day, "recipes": data.plan.recipes_for(day)}


# -------------------- API: Statistics --------------------
@router.get('/api/stats')
def api_stats(mode: str = Query(default="week"), date: Optional[str] = Query(default=None),
              repo: SnapshotRepository = Depends(get_repository)):
    if mode not in PERIOD_MODES:
        raise HTTPException(status_code=400, detail=f"mode must be one of {', '.join(PERIOD_MODES)}")
    data = repo.load()
    return compute_period_stats(data.plan, data.recipes, mode, _parse_iso(date))


@router.get('/api/stats/day')
def api_stats_day(date: Optional[str] = Query(default=None), repo: SnapshotRepository = Depends(get_repository)):
    data = repo.load()
    return compute_day_summary(data.plan, data.recipes, _parse_iso(date).isoformat())


@router.get('/api/stats/year-overview')
def api_stats_year(year: Optional[int] = Query(default=None), repo: SnapshotRepository = Depends(get_repository)):
    data = repo.load()
    year = year or _date.today().year
    return {"year": year, "months": compute_year_overview(data.plan, data.recipes, year)}


# -------------------- API: Export / Import --------------------
@router.get('/api/export')
def api_export(repo: SnapshotRepository = Depends(get_repository)):
    data = repo.load().stamp()
    filename = EXPORT_FILENAME_TEMPLATE.format(date=_date.today().isoformat())
    return JSONResponse(content=data.to_dict(),
                        headers={"Content-Disposition": f'attachment; filename="{filename}"'})


@router.post('/api/import')
def api_import(payload: dict = Body(...),
               repo: SnapshotRepository = Depends(get_repository),
               bus: EventBus = Depends(get_bus)):
    try:
        imported = parse_snapshot(payload)
    except ValidationError as e:
        logger.warning("Rejected import: %s errors", e.error_count())
        raise HTTPException(status_code=400, detail="文件格式不正确，无法导入。")
    backups = BackupManager(repo.path.parent, BACKUP_DIR if repo.path == SNAPSHOT_FILE else None, keep=BACKUP_KEEP)
    data = DataImporter(repo, backups).apply(imported)
    _notify(bus, CATALOG_CHANGED, data)
    return {"imported": True, "recipes": len(data.recipes), "days": len(data.plan.meals)}


# Include routers
app.include_router(router)
