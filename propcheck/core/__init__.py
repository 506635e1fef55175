# propcheck/core/__init__.py
"""
Core components: validation engine, predicates, errors.
"""
