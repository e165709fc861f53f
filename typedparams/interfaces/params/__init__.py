"""
FastAPI integration for the params bounded context.
"""
