from dataclasses import dataclass, field

from .settings import MERGE_COPY_DELAY

# ============================================================
# ===================== STEP ENGINE ==========================
# ============================================================
#
# Every sorter is a resumable automaton. One call to step() does one
# elementary piece of work (a comparison, a comparison plus exchange,
# or one bookkeeping transition) and leaves its cursors ready for the
# next call. Nothing loops over the array inside step(), except the
# merge planner's copy into the scratch buffer.


@dataclass
class RunStats:
    comparisons: int   = 0
    swaps:       int   = 0
    logic_ms:    float = 0.0


@dataclass
class StepResult:
    """
    touched     : indices read or written by this step
    value       : value of the element touched, 0 when nothing was
    comparisons : comparisons done by this step (0 or 1)
    swaps       : exchanges / writes done by this step (0 or 1)
    completed   : True once the sorter has finished
    """
    touched:     list  = field(default_factory=list)
    value:       int   = 0
    comparisons: int   = 0
    swaps:       int   = 0
    completed:   bool  = False


class Sorter:
    key = ""
    scans_by_index = False
    extra_delay    = 0

    def __init__(self, n: int):
        self.n    = n
        self.done = False

    @property
    def outer_cursor(self) -> int:
        return 0

    def step(self, data: list, stats: RunStats) -> StepResult:
        if self.done:
            return StepResult(completed=True)
        if self.n < 2:
            self.done = True
            return StepResult(completed=True)
        res = self._advance(data)
        stats.comparisons += res.comparisons
        stats.swaps       += res.swaps
        res.completed = self.done
        return res

    def _advance(self, data: list) -> StepResult:
        raise NotImplementedError


class BubbleSorter(Sorter):
    key = "bubble"
    scans_by_index = True

    def __init__(self, n):
        super().__init__(n)
        self.i = 0
        self.j = 0

    @property
    def outer_cursor(self):
        return self.i

    def _advance(self, data):
        j   = self.j
        res = StepResult(touched=[j, j+1], value=data[j+1], comparisons=1)
        if data[j] > data[j+1]:
            data[j], data[j+1] = data[j+1], data[j]; res.swaps = 1
        self.j += 1
        if self.j >= self.n - 1 - self.i:
            self.j = 0; self.i += 1
            if self.i >= self.n - 1: self.done = True
        return res


class SelectionSorter(Sorter):
    key = "selection"
    scans_by_index = True

    def __init__(self, n):
        super().__init__(n)
        self.i = 0
        self.j = 1
        self.min_idx = 0

    @property
    def outer_cursor(self):
        return self.i

    def _advance(self, data):
        j   = self.j
        res = StepResult(touched=[j, self.min_idx], value=data[j], comparisons=1)
        if data[j] < data[self.min_idx]: self.min_idx = j
        self.j += 1
        if self.j >= self.n:
            i, mi = self.i, self.min_idx
            if mi != i:
                data[i], data[mi] = data[mi], data[i]; res.swaps = 1
            self.i += 1; self.j = self.i + 1; self.min_idx = self.i
            if self.i >= self.n - 1: self.done = True
        return res


class InsertionSorter(Sorter):
    key = "insertion"
    scans_by_index = True

    def __init__(self, n):
        super().__init__(n)
        self.i = 1
        self.j = 1

    @property
    def outer_cursor(self):
        return self.i

    def _advance(self, data):
        j   = self.j
        res = StepResult(touched=[j], value=data[j])
        if j > 0:
            res.touched.append(j-1); res.comparisons = 1
            if data[j] < data[j-1]:
                data[j], data[j-1] = data[j-1], data[j]; res.swaps = 1
                self.j -= 1
                return res
        self.i += 1; self.j = self.i
        if self.i >= self.n: self.done = True
        return res


class QuickSorter(Sorter):
    """
    Lomuto partition with the last element of each range as pivot.
    Recursion is replaced by a stack of pending (low, high) ranges;
    only ranges holding two or more elements are pushed.
    """
    key = "quick"

    def __init__(self, n):
        super().__init__(n)
        self.stack = [(0, n - 1)] if n >= 2 else []
        self.partitioning = False
        self.low = self.high = 0
        self.i = self.j = 0

    def _advance(self, data):
        if not self.partitioning:
            if not self.stack:
                self.done = True
                return StepResult()
            self.low, self.high = self.stack.pop()
            self.i = self.low - 1; self.j = self.low
            self.partitioning = True
            return StepResult(touched=[self.high])

        lo, hi, j = self.low, self.high, self.j
        if j < hi:
            res = StepResult(touched=[j, hi], value=data[j], comparisons=1)
            if data[j] < data[hi]:
                self.i += 1
                if self.i != j:
                    data[self.i], data[j] = data[j], data[self.i]; res.swaps = 1
            self.j += 1
            return res

        p   = self.i + 1
        res = StepResult(touched=[p, hi], value=data[hi])
        if p != hi:
            data[p], data[hi] = data[hi], data[p]; res.swaps = 1
        if p + 1 < hi: self.stack.append((p + 1, hi))
        if lo < p - 1: self.stack.append((lo, p - 1))
        self.partitioning = False
        return res


class MergeSorter(Sorter):
    """
    Bottom-up merge sort. Runs of run_size are merged pairwise from the
    left; when a pass reaches the end of the array run_size doubles.
    Each merge first copies [l, r] into the scratch buffer, then writes
    one element back per step.
    """
    key = "merge"

    def __init__(self, n):
        super().__init__(n)
        self.scratch    = [0] * n
        self.run_size   = 1
        self.left_start = 0
        self.copying    = False
        self.l = self.m = self.r = 0
        self.i = self.j = self.k = 0

    @property
    def extra_delay(self):
        return MERGE_COPY_DELAY if self.copying else 0

    def _advance(self, data):
        n = self.n
        if not self.copying:
            if self.run_size >= n:
                self.done = True
                return StepResult()
            if self.left_start >= n - 1:
                self.run_size *= 2; self.left_start = 0
                return StepResult()
            l = self.left_start
            m = min(l + self.run_size - 1, n - 1)
            r = min(l + 2 * self.run_size - 1, n - 1)
            self.scratch[l:r+1] = data[l:r+1]
            self.l, self.m, self.r = l, m, r
            self.i, self.j, self.k = l, m + 1, l
            self.copying = True
            return StepResult(touched=[l, r])

        if self.k > self.r:
            self.copying = False
            self.left_start += 2 * self.run_size
            return StepResult()

        tmp, i, j, m, r = self.scratch, self.i, self.j, self.m, self.r
        res = StepResult(touched=[self.k])
        if i <= m and j <= r: res.comparisons = 1
        if i <= m and (j > r or tmp[i] <= tmp[j]):
            v = tmp[i]; self.i += 1
        else:
            v = tmp[j]; self.j += 1
        data[self.k] = v; res.value = v; res.swaps = 1
        self.k += 1
        return res


SORTERS = {cls.key: cls for cls in
           (BubbleSorter, SelectionSorter, InsertionSorter, QuickSorter, MergeSorter)}


def make_sorter(key: str, n: int) -> Sorter:
    if key not in SORTERS:
        raise KeyError(f"Unknown key: {key}")
    return SORTERS[key](n)
