# tests\__init__.py
"""
Test Suite for the Task Tracker.

Organization:
- `core`: Domain model, Task Store and Load/Save use cases with mocked ports.
- `adapters`: HTTP endpoints (TestClient) and the JSON file repository.
- `integration`: Full request workflows and the startup/shutdown lifecycle.
"""
