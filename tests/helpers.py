"""Thread helpers shared by the concurrency tests."""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Sequence, Tuple


def run_concurrently(calls: Sequence[Tuple[Callable[..., Any], tuple]]) -> List[Any]:
    """Start every call at the same moment; return results or raised exceptions in order."""
    barrier = threading.Barrier(len(calls))

    def _run(call: Tuple[Callable[..., Any], tuple]) -> Any:
        func, args = call
        barrier.wait()
        try:
            return func(*args)
        except Exception as exc:
            return exc

    with ThreadPoolExecutor(max_workers=len(calls)) as pool:
        return list(pool.map(_run, calls))
