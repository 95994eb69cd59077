from notifications.notifier import Notice, Notifier

__all__ = ["Notice", "Notifier"]
