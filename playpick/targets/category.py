"""
Target categories and the naming rules that assign them.
"""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Classification bucket for a target, in selection order."""

    DESKTOP = "desktop"
    MOBILE_SAFARI = "mobile-safari"
    MOBILE_CHROME = "mobile-chrome"
    TABLET = "tablet"

    @property
    def label(self) -> str:
        """Human-readable name used in reports."""
        return _LABELS[self]

    @classmethod
    def from_hint(cls, hint: str) -> Category:
        """
        Resolve a category hint such as "mobile-safari" or "Mobile Safari".

        Raises:
            ValueError: If the hint names no category
        """
        key = hint.strip().lower().replace("_", "-").replace(" ", "-")
        for category in cls:
            if category.value == key:
                return category
        raise ValueError(f"unknown category: {hint!r}")


_LABELS = {
    Category.DESKTOP: "Desktop",
    Category.MOBILE_SAFARI: "Mobile Safari",
    Category.MOBILE_CHROME: "Mobile Chrome",
    Category.TABLET: "Tablet",
}

# Order in which categories are reported and selected
CATEGORY_ORDER = (
    Category.DESKTOP,
    Category.MOBILE_SAFARI,
    Category.MOBILE_CHROME,
    Category.TABLET,
)

DESKTOP_BROWSERS = frozenset({"chromium", "firefox", "edge", "safari", "webkit"})

# Prefix rules are checked in this order, before the desktop rule
_PREFIX_RULES = (
    ("Tablet", Category.TABLET),
    ("Mobile Safari", Category.MOBILE_SAFARI),
    ("Mobile Chrome", Category.MOBILE_CHROME),
)


def is_desktop_name(name: str) -> bool:
    """True if name is exactly a desktop browser name, ignoring case."""
    lowered = name.lower()
    if "mobile" in lowered or "tablet" in lowered:
        return False
    return lowered in DESKTOP_BROWSERS


def categorize(name: str) -> Category | None:
    """
    Classify a target name; first matching rule wins.

    1. Tablet:        starts with "Tablet"
    2. Mobile Safari: starts with "Mobile Safari"
    3. Mobile Chrome: starts with "Mobile Chrome"
    4. Desktop:       one of chromium/firefox/edge/safari/webkit, any case

    Returns:
        The category, or None for names matching no rule
    """
    for prefix, category in _PREFIX_RULES:
        if name.startswith(prefix):
            return category
    if is_desktop_name(name):
        return Category.DESKTOP
    return None
