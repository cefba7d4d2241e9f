"""
Shared Infrastructure Layer
Database and observability
"""
