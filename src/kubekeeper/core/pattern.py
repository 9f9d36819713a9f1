"""Glob matching for cluster context names.

Only one wildcard symbol is understood: ``*`` matches any run of characters,
including none.  Everything else is compared literally and case-sensitively,
and the whole context must match the whole pattern.
"""

from __future__ import annotations

WILDCARD = "*"


def matches(context: str, pattern: str) -> bool:
    """Return ``True`` iff *context* matches *pattern*.

    A single left-to-right scan that remembers the position right after the
    last wildcard seen.  On a mismatch the scan restarts from there, letting
    the wildcard swallow one more context character.  Worst case is
    ``O(len(context) * len(pattern))`` with no recursion.

    >>> matches("kube-production-1", "*prod*")
    True
    >>> matches("", "*prod*")
    False
    """
    c_idx = 0
    p_idx = 0
    # Where to resume after the most recent wildcard (p_idx 0 means none yet)
    retry_c_idx = 0
    retry_p_idx = 0

    while c_idx < len(context):
        if p_idx < len(pattern):
            if pattern[p_idx] == WILDCARD:
                retry_c_idx = c_idx + 1
                retry_p_idx = p_idx + 1
                p_idx += 1
                continue
            if context[c_idx] == pattern[p_idx]:
                c_idx += 1
                p_idx += 1
                continue

        # End of pattern or literal mismatch: let the last wildcard eat one more char
        if retry_p_idx != 0:
            c_idx = retry_c_idx
            p_idx = retry_p_idx
            retry_c_idx += 1
            continue

        return False

    # Context is exhausted, only trailing wildcards may remain
    return all(char == WILDCARD for char in pattern[p_idx:])
