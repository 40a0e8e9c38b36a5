"""
Dispatcher Tests

Tests for the core dispatch logic including:
- Floor validation and direction inference
- Destination queue insertion
- Lift state machine operations
- Lift filtering and hall call deduplication
"""
