"""
Families Domain Layer
Entities, value objects and the pure assignment services
"""
