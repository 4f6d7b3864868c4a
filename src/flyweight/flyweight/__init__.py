# ABOUTME: Flyweight package initialization for the shared-object registry
# ABOUTME: Provides identity-preserving object sharing keyed by canonical strings

"""
Flyweight shared-object registry package.

This package provides an in-process keyed object pool: callers request a
shared object by key, receive the identical instance for every request of
that key, and supply per-call (extrinsic) state when operating on it. It
follows the same separation used throughout the project between interfaces,
models, and implementations.
"""

__version__ = "0.1.0"
