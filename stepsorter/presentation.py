from dataclasses import dataclass, field

from .settings import (
    WINDOW_WIDTH, WINDOW_HEIGHT, BAR_SCALE, BAR_SPACING, BAR_BOTTOM_PAD,
    BACKGROUND_COLOR, FINALIZED_COLOR, ACTIVE_COLOR, PIVOT_COLOR, SHUFFLE_COLOR,
    PROGRESS_HEIGHT,
    ALGORITHMS, ALGORITHM_INFO, HELP_LINE,
)

# ============================================================
# ===================== PRESENTATION =========================
# ============================================================
#
# Turns a session into plain facts for the renderer: one role and
# colour per bar, the progress bar, and the text block. Nothing here
# touches pygame.

NORMAL    = "normal"
FINALIZED = "finalized"
PRIMARY   = "primary"
SECONDARY = "secondary"
SHUFFLE   = "shuffle"

ROLE_COLORS = {
    FINALIZED: FINALIZED_COLOR,
    PRIMARY:   ACTIVE_COLOR,
    SECONDARY: PIVOT_COLOR,
    SHUFFLE:   SHUFFLE_COLOR,
}

GRADIENT_MAX = 100


def value_to_color(value, max_value=GRADIENT_MAX):
    r = value / max_value
    return (min(255, int(30 + r * 100)),
            min(255, int(30 + r * 200)),
            min(255, int(150 + r * 105)))


def bar_color(role, value):
    if role == NORMAL:
        return value_to_color(value)
    return ROLE_COLORS[role]


def algorithm_name(key):
    for name, k in ALGORITHMS:
        if k == key:
            return name
    raise KeyError(f"Unknown key: {key}")


def bar_roles(session) -> list:
    ds     = session.dataset
    n      = len(ds)
    roles  = [NORMAL] * n
    sorter = session.sorter

    if ds.shuffling:
        if ds.cursor < n:
            roles[ds.cursor] = SHUFFLE
        return roles
    if sorter.done:
        return [FINALIZED] * n

    def mark(k, role):
        if 0 <= k < n:
            roles[k] = role

    key = sorter.key
    if key == "bubble":
        for k in range(max(0, n - sorter.i), n): roles[k] = FINALIZED
        mark(sorter.j, PRIMARY); mark(sorter.j + 1, PRIMARY)
    elif key == "selection":
        for k in range(min(sorter.i, n)): roles[k] = FINALIZED
        mark(sorter.j, PRIMARY)
        mark(sorter.min_idx, SECONDARY)
    elif key == "insertion":
        mark(sorter.j, PRIMARY)
    elif key == "quick":
        if sorter.partitioning:
            mark(sorter.j, PRIMARY)
            mark(sorter.high, SECONDARY)
    elif key == "merge":
        if sorter.copying:
            for k in session.last_step.touched: mark(k, FINALIZED)
    return roles


def info_lines(session) -> list:
    if session.dataset.shuffling:
        return ["STATUS: Shuffling..."]
    complexity, desc = ALGORITHM_INFO[session.key]
    st = session.stats
    lines = [
        f"ALGORITHM:  {algorithm_name(session.key)}",
        f"COMPLEXITY: {complexity}",
        f"HOW IT WORKS: {desc}",
        "",
        f"Comparisons:  {st.comparisons}",
        f"Swaps:        {st.swaps}",
        f"Real CPU Time:{st.logic_ms:.3f}ms",
        f"Delay Added:  {session.delay}ms",
    ]
    if session.sorter.done:
        lines.append("STATUS: Sorted")
    lines += ["", HELP_LINE]
    return lines


@dataclass
class Frame:
    background: tuple = BACKGROUND_COLOR
    bars:       list  = field(default_factory=list)   # [(x, y, w, h, color)]
    progress_bg:   tuple = (0, 0, 0, 0)
    progress_fill: tuple = (0, 0, 0, 0)
    lines:      list  = field(default_factory=list)


def bar_rects(values, roles, width=WINDOW_WIDTH, height=WINDOW_HEIGHT):
    n = len(values)
    if n == 0:
        return []
    bw     = width / n
    bottom = height - BAR_BOTTOM_PAD
    rects  = []
    for k, v in enumerate(values):
        h = v * BAR_SCALE
        rects.append((k * bw, bottom - h, bw - BAR_SPACING, h, bar_color(roles[k], v)))
    return rects


def describe(session, width=WINDOW_WIDTH, height=WINDOW_HEIGHT) -> Frame:
    values = session.dataset.values
    roles  = bar_roles(session)
    y      = height - PROGRESS_HEIGHT
    frac   = session.progress.value
    return Frame(
        background=BACKGROUND_COLOR,
        bars=bar_rects(values, roles, width, height),
        progress_bg=(0, y, width, PROGRESS_HEIGHT),
        progress_fill=(0, y, frac * width, PROGRESS_HEIGHT),
        lines=info_lines(session),
    )

