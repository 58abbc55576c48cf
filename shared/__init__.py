"""
Shared

Infrastructure shared across exports (database access).
"""
