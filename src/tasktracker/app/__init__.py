"""FastAPI application for the task tracking service."""
