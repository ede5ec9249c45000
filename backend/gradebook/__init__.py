"""
Grade item analysis service.
"""
