"""
Core utilities: numeric parsing, crossing detectors, geo and IPv4 helpers,
functional building blocks, value objects and JSON Schema contracts.

All modules are pure and independent of external systems; the only side
effects are inline trace logging and schema file loading.
"""
