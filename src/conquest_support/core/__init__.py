"""
conquest_support.core — contact actions, overlay state, layout, and shared infrastructure.

Modules:
    config      Configuration loading (TOML + env vars)
    contact     ContactTarget and screen content
    constants   Exit codes, defaults, limits
    exceptions  Conquest Support exception hierarchy
    logging     Log handler setup (rich / JSON)
"""
