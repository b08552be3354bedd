from __future__ import annotations

from typing import Optional, Sequence

from authform.domain.entities import ApiErrorItem
from authform.domain.ports import GlobalErrorSink


def route_global_error(
    global_errors: Sequence[ApiErrorItem],
    set_global_error: Optional[GlobalErrorSink] = None,
) -> None:
    """Clear the global slot, then surface the first global error if any."""
    if set_global_error is None:
        return
    set_global_error(None)
    # Only the first error is shown until stacked notifications exist.
    if global_errors:
        set_global_error(global_errors[0])


__all__ = ["route_global_error"]
