"""
Core package.

Holds application-wide configuration.
"""
