# task_tracker\__init__.py
"""
Task Tracker - a single-resource JSON task service.

This package contains the service implementation following
Hexagonal Architecture (Ports & Adapters).
"""

__version__ = "1.0.0"
