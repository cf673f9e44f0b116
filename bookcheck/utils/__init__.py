"""
Utilities Package

Helpers shared across the package:
- log.py: Logging setup for test runs
"""
