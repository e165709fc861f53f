"""
Params bounded context: domain layer.

This module contains all domain logic for typed request parameters:
- Parameter types (parse hook plus error-response policy)
- Binding raw text into TypedParameter values
- Error response construction for parse failures
- Built-in parameter types
"""
