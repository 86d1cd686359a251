"""
Test Fixtures and Utilities

Builders for synthetic expense records and stored documents.
"""
