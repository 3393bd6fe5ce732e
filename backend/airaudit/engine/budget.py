"""
Investment budget helpers: CAPEX total, chapter totals and new lines.
"""

import uuid

from airaudit.config import BUDGET_CHAPTERS, BudgetCategory, BudgetChapter
from airaudit.models.measures import BudgetSummary, ChapterTotal, PredefinedMeasure
from airaudit.models.project import BudgetItem


def _new_item_id() -> str:
    return uuid.uuid4().hex[:9]


def capex_total(items: list[BudgetItem]) -> float:
    """Sum of quantity × unit price over all budget lines."""
    return sum(item.quantity * item.unit_price for item in items)


def chapter_totals(items: list[BudgetItem]) -> list[ChapterTotal]:
    """Totals for every budget chapter in report order, empty ones included."""
    totals = []
    for chapter in BUDGET_CHAPTERS:
        chapter_items = [i for i in items if i.chapter == chapter]
        totals.append(ChapterTotal(
            chapter=chapter,
            item_count=len(chapter_items),
            total=capex_total(chapter_items),
        ))
    return totals


def summarize_budget(items: list[BudgetItem]) -> BudgetSummary:
    return BudgetSummary(chapters=chapter_totals(items), capex_total=capex_total(items))


def items_for_measure(measure: PredefinedMeasure) -> list[BudgetItem]:
    """Instantiate a measure's budget templates as tagged budget lines."""
    return [
        BudgetItem(
            id=_new_item_id(),
            measure_id=measure.id,
            description=t.description,
            category=t.category,
            chapter=t.chapter,
            quantity=t.quantity,
            unit_price=t.unit_price,
        )
        for t in measure.default_budget_templates
    ]


def new_custom_item(chapter: BudgetChapter) -> BudgetItem:
    """Blank line added by hand to a chapter."""
    return BudgetItem(
        id=_new_item_id(),
        description="New custom item",
        category=BudgetCategory.MATERIAL,
        chapter=chapter,
        quantity=1,
        unit_price=0,
    )
