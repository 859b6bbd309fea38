"""
Notification subsystem.

- gateway.py: single in-app banner + permission-gated native notifications
- desktop.py: plyer-backed desktop notifier
"""
