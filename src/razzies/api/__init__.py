"""API module for Razzies.

API layer:
- Validates inputs, reads DB through the repository
- Returns JSON payloads
- Forbidden: CSV parsing, interval computation outside the intervals package
"""
