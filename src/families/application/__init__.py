"""
Families Application Layer
Queries, commands, DTOs and the auto-assign service
"""
