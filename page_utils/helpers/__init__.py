"""Helpers: app-aware convenience.

Contents should:
- Know about how the package is run (CLI, env, log sinks)
- Wrap multiple steps into a higher-level action
"""
