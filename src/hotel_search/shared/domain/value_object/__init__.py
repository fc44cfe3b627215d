from .paged_result import PagedResult

__all__ = ["PagedResult"]
