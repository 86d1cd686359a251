"""
Test Suite for the Expense Tracker

Test Structure:
- fixtures/: Shared test data builders
- unit/: Unit tests mirroring the src/ package structure
- integration/: CLI workflow tests through click's CliRunner
"""
