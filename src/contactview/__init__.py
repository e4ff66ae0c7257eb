"""In-memory contact list view controller with batched edits."""

__version__ = "0.1.0"
