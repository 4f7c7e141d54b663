import os
import json

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH   = 1280
WINDOW_HEIGHT  = 1000
NUM_BARS       = 150
FPS            = 0          # 0 = uncapped, the delay controls the pace

VALUE_MIN      = 5
VALUE_MAX      = 104
BAR_SCALE      = 7.0        # pixels per unit of value
BAR_SPACING    = 1
BAR_BOTTOM_PAD = 30

START_DELAY          = 0    # ms added after every sort step
SHUFFLE_DELAY        = 1    # ms added after every shuffle step
MERGE_COPY_DELAY     = 2    # extra ms while merge sort writes back

# "legacy" draws the swap partner from the whole array on every step,
# "fisher_yates" draws it from [cursor, N) and gives an unbiased shuffle.
SHUFFLE_MODE = "legacy"
SHUFFLE_MODES = ("legacy", "fisher_yates")

PROGRESS_CEILING = 0.999

# ============================================================
# ====================== SOUND SETTINGS ======================
# ============================================================
#
# TONE - frequency of the running tone for the last touched value:
#   freq = 0                        if value <= 0
#   freq = TONE_BASE + TONE_STEP*v  otherwise
ENABLE_SOUND = True
SAMPLE_RATE  = 44100
CHUNK_SIZE   = 512
VOLUME       = 0.05
TONE_BASE    = 200.0
TONE_STEP    = 8.0

# ============================================================
# ========================= UI THEME =========================
# ============================================================

BACKGROUND_COLOR = (10, 12, 20)
FINALIZED_COLOR  = (255, 255, 255)
ACTIVE_COLOR     = (255, 50, 50)
PIVOT_COLOR      = (255, 0, 255)
SHUFFLE_COLOR    = (255, 50, 50)

PROGRESS_BG      = (40, 40, 50)
PROGRESS_FILL    = (0, 255, 100)
PROGRESS_HEIGHT  = 25

TEXT_COLOR       = (255, 255, 255)
TEXT_ACCENT      = (100, 255, 255)
TEXT_SHADOW      = (0, 0, 0)
TEXT_SIZE        = 22
TEXT_X           = 20
TEXT_Y           = 20
LINE_HEIGHT      = 36
SHADOW_OFFSET    = 2

CAPTION = "Algorithm Visualizer!"

# (display name, key) in keyboard order: 1..5
ALGORITHMS = [
    ("Bubble Sort",    "bubble"),
    ("Selection Sort", "selection"),
    ("Insertion Sort", "insertion"),
    ("Quick Sort",     "quick"),
    ("Merge Sort",     "merge"),
]

# key -> (complexity label, how it works)
ALGORITHM_INFO = {
    "bubble":    ("O(N^2) - Slow",               "Swaps adjacent elements repeatedly."),
    "selection": ("O(N^2) - Slow",               "Finds the smallest item and moves it."),
    "insertion": ("O(N^2) - OK for small lists", "Builds sorted array one item at a time."),
    "quick":     ("O(N log N) - Fast",           "Divides list around a pivot point."),
    "merge":     ("O(N log N) - Stable",         "Divides list in half, sorts, and merges."),
}

HELP_LINE = "KEYS: 1-5 algorithm | R reshuffle | UP/DOWN delay | ESC quit"

# ============================================================
# ==================== SETTINGS JSON =========================
# ============================================================

_PKG_DIR      = os.path.dirname(os.path.abspath(__file__))
SETTINGS_JSON = os.path.join(_PKG_DIR, "stepsorter_settings.json")

DEFAULTS = dict(
    num_bars=NUM_BARS,
    start_delay=START_DELAY,
    sound=ENABLE_SOUND,
    shuffle=SHUFFLE_MODE,
    seed=None,
)


def _valid(key, value) -> bool:
    if key in ("num_bars", "start_delay"):
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if key == "sound":
        return isinstance(value, bool)
    if key == "shuffle":
        return value in SHUFFLE_MODES
    if key == "seed":
        return value is None or (isinstance(value, int) and not isinstance(value, bool))
    return False


def load_settings(path: str = SETTINGS_JSON) -> dict:
    """
    Read user overrides from a JSON object and merge them over DEFAULTS.
    A missing file gives the defaults. Unknown keys and bad values are
    reported and skipped one by one.
    """
    cfg = dict(DEFAULTS)
    if not os.path.exists(path):
        return cfg
    try:
        with open(path) as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Settings load error ({path}): {e}")
        return cfg
    if not isinstance(raw, dict):
        print(f"Settings load error ({path}): expected a JSON object")
        return cfg
    for key, value in raw.items():
        if key not in DEFAULTS:
            print(f"Settings: unknown key {key!r} ignored")
        elif not _valid(key, value):
            print(f"Settings: bad value for {key!r}: {value!r}")
        else:
            cfg[key] = value
    return cfg
