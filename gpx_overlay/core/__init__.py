"""Core utilities and shared infrastructure.

- config: Render configuration loading and validation
- constants: Named constants (GPX tags, defaults, zoom tuning)
- exceptions: Custom exception hierarchy
"""
