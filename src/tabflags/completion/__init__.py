"""Tab completion of flag names: matching, ranking and rendering."""

from .engine import CompletionResult as CompletionResult
from .engine import complete as complete
from .engine import handle_completions as handle_completions

__all__ = ["CompletionResult", "complete", "handle_completions"]
