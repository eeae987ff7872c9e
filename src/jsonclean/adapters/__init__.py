"""Adapters (infrastructure) for JSONCLEAN.

Provide concrete implementations of the interfaces: the regex-based control
character sanitizer and the batch codecs used to read and write batches.

Dependency rule: may import `jsonclean.interfaces`; the interfaces must not
import this package.
"""
