"""
Core infrastructure: settings, logging, database access and JWT helpers.
"""
