"""
Notes API with cookie-based session authentication.
"""
