# threaded_runner.py - run zero-arg callables on a small thread pool, keeping submission order.

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")


def run_parallel(tasks: Iterable[Callable[[], T]], max_workers: int = 4) -> List[T]:
    """
    Run callables in a thread pool and return their results in the order the
    tasks were given. The first task exception is re-raised once all tasks finish.
    """
    tasks = list(tasks)
    if not tasks:
        return []
    if len(tasks) == 1 or max_workers <= 1:
        return [t() for t in tasks]
    with ThreadPoolExecutor(max_workers=min(max_workers, len(tasks))) as ex:
        futs = [ex.submit(t) for t in tasks]
    return [f.result() for f in futs]
