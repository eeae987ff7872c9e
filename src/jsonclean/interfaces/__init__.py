"""Interfaces (application boundary) for JSONCLEAN.

Defines framework-free application contracts: ABCs, enums, and type aliases
shared by the service layer and adapters (sanitizers, batch codecs).

Dependency rule: this package is independent; do not import from any
`jsonclean.*` modules. It may be imported by `jsonclean.service_layer`,
`jsonclean.adapters`, and `jsonclean.bootstrap`.
"""
