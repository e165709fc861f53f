"""
Interfaces layer package.

Contains FastAPI dependencies, Pydantic schemas and routers.
Binding logic lives in the domain layer; this layer only reads raw
request values and renders domain error responses.
"""
