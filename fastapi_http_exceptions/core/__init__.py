"""
Framework-independent core.

Status registry, exception taxonomy, response outcomes, the translator
between them, and the schema validation adapter.
"""
