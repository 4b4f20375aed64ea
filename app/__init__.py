"""FastAPI Bug Reporter Application.

A FastAPI application for tracking bug reports with:
- RESTful CRUD operations with partial updates
- Per-key merging of free-form bug metadata
- SQLAlchemy ORM with async support, or an in-memory store
- Slack notifications
"""
