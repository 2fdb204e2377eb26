"""Prefix completion of canonical date strings.

This module provides:
    - DateEnumerator: Lists canonical dates matching a typed prefix
    - CompletionCache: Bounded memo table shared across keystrokes
    - PrefixScope, parse_prefix: Prefix resolution
"""

from __future__ import annotations

from naivedate.completion.cache import CompletionCache
from naivedate.completion.enumerator import (
    DateEnumerator,
    PrefixScope,
    generate_scope,
    parse_prefix,
)

__all__: list[str] = [
    "CompletionCache",
    "DateEnumerator",
    "PrefixScope",
    "generate_scope",
    "parse_prefix",
]
