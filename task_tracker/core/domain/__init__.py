# task_tracker\core\domain\__init__.py
"""
Domain Entities and Errors.

The Task model is the only entity in the system. Every failure the core can
produce is a subclass of `DomainError` (see `exceptions`).
"""
