"""Bootstrap (composition root) for JSONCLEAN.

Assembles the application at runtime: wires the concrete sanitizer into the
service-layer handlers and builds the message bus that entrypoints use.

Import rules:
- Entry points import *this* package (not adapters/service_layer internals).
- This package may import: `jsonclean.adapters`, `jsonclean.service_layer`,
  `jsonclean.interfaces`, and `jsonclean.config`.
- Inner layers must not import `jsonclean.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
