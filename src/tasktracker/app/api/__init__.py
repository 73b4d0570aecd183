"""HTTP interface for the task tracking service."""
