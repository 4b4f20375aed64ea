"""Background tasks module.

FastAPI BackgroundTasks for quick, fire-and-forget work that must not block
the request, such as notifications.
"""

from app.tasks.notifications import notify_bug_creation

__all__ = ["notify_bug_creation"]
