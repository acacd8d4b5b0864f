"""
Dispatcher Tests

Tests for the dispatching core, driven by in-memory fakes:
- Step estimation and insertion index
- Cab / hall call assignment
- Direction indicator state machine
- Hall call registry
- Handler registration
"""
