"""Time-based workers driving the workspace."""

from .debounce import Debouncer, SearchPipeline

__all__ = ["Debouncer", "SearchPipeline"]
