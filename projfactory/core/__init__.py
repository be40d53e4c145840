"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants, datum table, radius coefficients
- exceptions: Custom exception hierarchy
"""
