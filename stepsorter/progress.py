from .settings import PROGRESS_CEILING


def sorted_pair_ratio(data) -> float:
    total = len(data) - 1
    if total <= 0:
        return 1.0
    ok = sum(1 for a, b in zip(data, data[1:]) if a <= b)
    return ok / total


class ProgressTracker:
    """
    Running-maximum completion fraction for the current run.

    Index-scanning sorters report outer_cursor / N. Quick and merge sort
    report the share of adjacent pairs already in order, which can dip
    while the sort works, so only the best value seen is kept. The value
    stays below 1.0 until the sorter reports completion.
    """

    def __init__(self):
        self.value = 0.0

    def reset(self):
        self.value = 0.0

    def update(self, sorter, data, completed: bool) -> float:
        if completed:
            self.value = 1.0
            return self.value
        n = len(data)
        if sorter.scans_by_index:
            raw = sorter.outer_cursor / n if n else 0.0
        else:
            raw = sorted_pair_ratio(data)
        raw = min(raw, PROGRESS_CEILING)
        if raw > self.value:
            self.value = raw
        return self.value
