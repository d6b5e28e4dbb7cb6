"""
Heap footprint measurement.

``deep_size`` walks the object graph reachable from a root with
``gc.get_referents`` and sums ``sys.getsizeof`` of each object exactly once.
Types, modules, functions and the interpreter singletons are neither counted
nor traversed: they belong to the process, not to the structure under test.
Cached small ints and interned strings reachable from the root are counted
once, the same way the baseline counts them.

NumPy arrays report their owned buffer through ``getsizeof``; object arrays
are additionally walked element by element since ndarray does not expose its
elements to the garbage collector. Views are charged for their base. Dict
keys are pushed explicitly, since a dict whose keys are all strings only
reports its values to ``gc.get_referents``.
"""
from __future__ import annotations

import gc
import os
import sys
import types
from typing import Any, Iterable

import numpy as np
import psutil

_SHARED_TYPES = (
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.CodeType,
)
_SINGLETONS = (None, True, False, Ellipsis, NotImplemented)


def _is_shared(obj: Any) -> bool:
    return isinstance(obj, _SHARED_TYPES) or any(obj is s for s in _SINGLETONS)


def deep_size(root: Any, exclude: Iterable[Any] = ()) -> int:
    """
    Return the retained size in bytes of everything reachable from ``root``.

    Objects in ``exclude`` are treated as shared: neither counted nor traversed.
    """
    seen: set[int] = {id(obj) for obj in exclude}
    total = 0
    pending = [root]

    while pending:
        obj = pending.pop()
        if id(obj) in seen or _is_shared(obj):
            continue
        seen.add(id(obj))
        total += sys.getsizeof(obj)

        if isinstance(obj, np.ndarray):
            if obj.base is not None:
                pending.append(obj.base)
            if obj.dtype == object:
                pending.extend(obj.ravel().tolist())
            continue

        if isinstance(obj, dict):
            # str-keyed dicts do not report their keys to the collector
            pending.extend(obj.keys())
        pending.extend(gc.get_referents(obj))

    return total


def process_rss_bytes() -> int:
    """Resident set size of the current process."""
    return psutil.Process(os.getpid()).memory_info().rss
