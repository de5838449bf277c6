"""Gallery ordering: fixed priorities first, everything else shuffled"""

import random
from typing import Optional, TypeVar

from portfolio.schemas.project import ProjectRecord

ALL_CATEGORIES = "all"

T = TypeVar("T")


def shuffle(items: list[T], rng: Optional[random.Random] = None) -> list[T]:
    """
    Fisher-Yates shuffle of a copy of items.

    Args:
        items: Items to shuffle, left untouched
        rng: Random source, module-level random when None

    Returns:
        New list in random order
    """
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def order_projects(
    projects: list[ProjectRecord],
    rng: Optional[random.Random] = None,
) -> list[ProjectRecord]:
    """
    Display order for the portfolio gallery.

    Projects with priority > 0 come first, ascending by priority (stable for
    ties), followed by the priority 0 projects in a fresh random order.
    """
    prioritized = sorted((p for p in projects if p.priority > 0), key=lambda p: p.priority)
    unprioritized = shuffle([p for p in projects if p.priority == 0], rng)
    return prioritized + unprioritized


def filter_by_category(projects: list[ProjectRecord], category: str = ALL_CATEGORIES) -> list[ProjectRecord]:
    """Keep projects whose category matches exactly; "all" keeps everything"""
    if category == ALL_CATEGORIES:
        return list(projects)
    return [p for p in projects if p.category == category]


def gallery(
    projects: list[ProjectRecord],
    category: str = ALL_CATEGORIES,
    rng: Optional[random.Random] = None,
) -> list[ProjectRecord]:
    """Ordered and filtered projects as shown on the portfolio page"""
    return filter_by_category(order_projects(projects, rng), category)
