"""
Core domain models, numeric primitives, and contracts.

This module contains the foundational building blocks that are independent
of any UI framework (rendering, events, reactive bindings).
"""
