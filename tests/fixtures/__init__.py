"""
Test Fixtures and Utilities

Shared test data and generators for comprehensive testing.

All test data is synthetic and does not contain real financial information.
"""
