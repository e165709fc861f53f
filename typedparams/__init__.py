"""
typedparams: typed request parameters for FastAPI.

Application package root. Follows a hexagonal layout (ports & adapters).

Bounded contexts:
    - params: Parsing raw request text into typed values and turning
      parse failures into structured HTTP error responses.

Layers:
    - domain: Pure parsing logic, parameter types, entities, errors.
    - interfaces: FastAPI dependencies, schemas, error rendering.
    - shared: Cross-cutting concerns (error handlers, logging).
    - core: Settings.
"""
