import random

from .settings import NUM_BARS, VALUE_MIN, VALUE_MAX, SHUFFLE_MODE, SHUFFLE_MODES


class Dataset:
    """
    The bar heights being sorted.

    The length is fixed at construction. regenerate() draws fresh values,
    the shuffle methods reorder the same values one exchange per call.
    """

    def __init__(self, size: int = NUM_BARS, rng: random.Random | None = None,
                 shuffle_mode: str = SHUFFLE_MODE):
        if shuffle_mode not in SHUFFLE_MODES:
            raise ValueError(f"Unknown shuffle mode: {shuffle_mode}")
        self.size         = max(0, int(size))
        self.rng          = rng or random.Random()
        self.shuffle_mode = shuffle_mode
        self.values       = []
        self.shuffling    = False
        self.cursor       = 0
        self.regenerate()

    def __len__(self):
        return self.size

    def regenerate(self):
        self.values    = [self.rng.randint(VALUE_MIN, VALUE_MAX) for _ in range(self.size)]
        self.shuffling = False
        self.cursor    = 0

    def begin_shuffle(self):
        self.shuffling = True
        self.cursor    = 0

    def shuffle_step(self) -> int | None:
        """
        Swap the element under the cursor with a random partner and
        return the cursor index, or end the shuffle and return None once
        the cursor has passed the last element.

        In "legacy" mode the partner comes from the whole array every
        time, which is not a uniform shuffle. "fisher_yates" keeps the
        partner in [cursor, N).
        """
        if not self.shuffling:
            return None
        n = self.size
        if self.cursor >= n:
            self.shuffling = False
            return None
        k = self.cursor
        if self.shuffle_mode == "fisher_yates":
            r = self.rng.randrange(k, n)
        else:
            r = self.rng.randrange(n)
        arr = self.values
        arr[k], arr[r] = arr[r], arr[k]
        self.cursor += 1
        return k
