"""ProjectHub API package.

Deadline reminders, notifications, reminders and request activity auditing
for the project management backend.
"""
