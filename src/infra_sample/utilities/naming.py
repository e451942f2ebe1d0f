"""
Naming helpers for construct ids and physical resource names.
MIT License. See Project Root for the license information.
"""

import re


_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def start_case(name: str) -> str:
    """
    Convert a name to start case.

    The name is split into words at camel-case, digit and punctuation
    boundaries; each word gets an upper-case first letter and the words are
    joined with single spaces.

    Examples:
        >>> start_case("keyPair")
        'Key Pair'
        >>> start_case("AsgCapacityProvider")
        'Asg Capacity Provider'
        >>> start_case("log_group")
        'Log Group'
    """
    words = _WORD_PATTERN.findall(name or "")
    return " ".join(word[0].upper() + word[1:] for word in words)


def build_construct_id(stack_id: str, name: str) -> str:
    """Derive the id of a resource from the owning stack's id: stack-<id>-<Start Case Name>"""
    return f"stack-{stack_id}-{start_case(name)}"
