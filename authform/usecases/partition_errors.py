from __future__ import annotations

from typing import Iterable, List, Optional

from authform.domain.entities import ApiErrorItem, Partition


def partition_errors(items: Optional[Iterable[ApiErrorItem]]) -> Partition:
    """Split errors into field-scoped and global buckets, keeping order.

    An item is field-scoped iff its ``param_name`` is a non-empty string.
    """
    field_errors: List[ApiErrorItem] = []
    global_errors: List[ApiErrorItem] = []
    for item in items or ():
        if item.param_name:
            field_errors.append(item)
        else:
            global_errors.append(item)
    return Partition(field_errors=tuple(field_errors), global_errors=tuple(global_errors))


__all__ = ["partition_errors"]
