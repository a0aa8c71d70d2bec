"""
Shared helpers: entry files, journal entries, recommendations and text scoring.
"""
