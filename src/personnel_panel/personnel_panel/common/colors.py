from __future__ import annotations

import random
from typing import Iterable, Optional

EMPLOYEE_COLORS: tuple[str, ...] = (
    "#E1306C",
    "#F56040",
    "#FCAF45",
    "#C13584",
    "#833AB4",
    "#405DE6",
    "#5B51D8",
    "#4285F4",
    "#34A853",
    "#FBBC04",
    "#EA4335",
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FFEAA7",
    "#DFE6E9",
    "#74B9FF",
    "#A29BFE",
    "#FD79A8",
)


def pick_color(used_colors: Iterable[Optional[str]], rng: Optional[random.Random] = None) -> str:
    """Pick a palette color not used yet; repeats are allowed once all are taken."""
    rng = rng or random
    used = {c.upper() for c in used_colors if c}
    available = [c for c in EMPLOYEE_COLORS if c.upper() not in used]
    if not available:
        return rng.choice(EMPLOYEE_COLORS)
    return rng.choice(available)
