"""Classic array and string algorithms: sorting, searching, sums, numbers and strings."""

__version__ = "0.1.0"

__all__ = ["numbers", "searching", "sorting", "strings", "sums"]