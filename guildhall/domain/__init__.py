"""
Guildhall domain layer.

Pure game rules: models, constants and the exceptions they raise. Nothing in
this package logs, reads configuration or publishes events.
"""
