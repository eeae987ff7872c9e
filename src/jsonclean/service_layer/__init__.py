"""Service layer for JSONCLEAN.

Implements application use-cases: commands, their handlers, and the message
bus that routes one to the other. Handlers receive their outbound ports (e.g.
the sanitizer) by dependency injection.

Dependency rule: may import `jsonclean.interfaces`, but not `jsonclean.adapters`
or `jsonclean.entrypoints`.
"""
