"""Shared utilities — logging setup and argument validation.

Rules
-----
* No helper logic.
* No I/O beyond the logging handler.
* Importable by any layer.
"""
