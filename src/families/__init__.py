"""
Families bounded context
Family trees of students and the child auto-assignment engine
"""
