"""
Shared Layer - Cross-Cutting Concerns
Error contract, application bases, database and logging infrastructure
"""
