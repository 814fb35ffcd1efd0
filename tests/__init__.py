"""
Test Suite for Frugeasy

Test Structure:
- fixtures/: Shared synthetic data generators
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and snapshot loading
- e2e/: CLI commands executed end to end

Test Data:
All test data is synthetic. Real financial data is never included in tests.
"""
