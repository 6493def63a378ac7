"""Small self-contained helpers that do not depend on package internals."""

from astarpath.utils.ids import EMPTY_RUN_ID, new_run_id

__all__ = ["EMPTY_RUN_ID", "new_run_id"]
