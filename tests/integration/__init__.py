"""Integration tests for idea-scout.

These tests are marked with @pytest.mark.integration. Tests that call the
real Brave Search API skip themselves unless BRAVE_SEARCH_API_KEY is set.
"""
