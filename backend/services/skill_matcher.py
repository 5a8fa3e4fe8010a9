"""Fuzzy skill and location comparison used by the match scorer.

Both predicates are case-insensitive, ignore surrounding whitespace and
treat runs of inner whitespace as one space.
Substring containment counts as a match in either direction, so "Java"
matches "JavaScript" and "Bangalore" matches "Bangalore Rural".
"""

import re
from types import MappingProxyType

# Canonical skill -> accepted spellings
SKILL_SYNONYMS: MappingProxyType = MappingProxyType({
    "javascript": frozenset({"js", "ecmascript", "node.js", "nodejs"}),
    "react": frozenset({"reactjs", "react.js"}),
    "python": frozenset({"py"}),
    "typescript": frozenset({"ts"}),
    "css": frozenset({"css3"}),
    "html": frozenset({"html5"}),
})

# Reverse index: every spelling (canonical included) -> canonical
_CANONICAL: MappingProxyType = MappingProxyType({
    **{variant: canonical
       for canonical, variants in SKILL_SYNONYMS.items()
       for variant in variants},
    **{canonical: canonical for canonical in SKILL_SYNONYMS},
})


def _normalize(value: str) -> str:
    return re.sub(r"\s+", " ", value.lower().strip())


def canonical_skill(skill: str) -> str:
    """Map a skill to its canonical spelling, or its normalized self."""
    norm = _normalize(skill)
    return _CANONICAL.get(norm, norm)


def _contains_either_way(a: str, b: str) -> bool:
    return a in b or b in a


def skills_match(skill_a: str, skill_b: str) -> bool:
    """True when two skill names refer to the same thing.

    Matches on equality, substring containment in either direction, or a
    shared entry in SKILL_SYNONYMS. Blank names never match.
    """
    a = _normalize(skill_a)
    b = _normalize(skill_b)
    if not a or not b:
        return False

    if a == b:
        return True

    if _contains_either_way(a, b):
        return True

    return canonical_skill(a) == canonical_skill(b)


def locations_match(location_a: str | None, location_b: str | None) -> bool:
    """True when one location equals or contains the other ("Mumbai" vs "Mumbai, India")."""
    a = _normalize(location_a or "")
    b = _normalize(location_b or "")
    if not a or not b:
        return False
    return a == b or _contains_either_way(a, b)
