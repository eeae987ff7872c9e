"""Entrypoints (inbound adapters) for JSONCLEAN.

Expose the application to the outside world: CLI commands (and, later, any
HTTP handler). Parse and validate inputs, call the bootstrapped message bus,
and present results.

Dependency rule: may import `jsonclean.bootstrap`, `jsonclean.service_layer`, and
`jsonclean.interfaces`; avoid importing `jsonclean.adapters` directly.
"""
