"""
Litigator case-management analytics service.
"""
