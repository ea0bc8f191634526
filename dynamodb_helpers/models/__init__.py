from .pagination import PaginatedResult, PaginationOptions

__all__ = [
    "PaginatedResult",
    "PaginationOptions",
]
