"""
Domain layer package.

Contains pure parsing logic: parameter types, value objects and errors.
This layer has ZERO external dependencies.
No framework imports, no IO beyond the injected logger.
"""
