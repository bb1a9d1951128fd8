from __future__ import annotations

import re
from types import MappingProxyType
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

_NON_KEY_CHARS = re.compile(r"[^a-z0-9+#]")


def normalize_skill(token: str) -> str:
    """Lower-case and strip everything except letters, digits, '+' and '#'."""
    if not token:
        return ""
    return _NON_KEY_CHARS.sub("", token.lower())


@dataclass(frozen=True)
class AliasTable:
    """
    Closed set of equivalent skill spellings, e.g. {"k8s": {"kubernetes"}}.

    Each group is the canonical key plus its long forms, all stored as
    normalized keys. Groups are disjoint: a key resolves to at most one group.
    """
    entries: Tuple[Tuple[str, FrozenSet[str]], ...]
    _index: Mapping[str, int] = field(compare=False, repr=False)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "AliasTable":
        entries: List[Tuple[str, FrozenSet[str]]] = []
        index: Dict[str, int] = {}
        for pos, (key, values) in enumerate(mapping.items()):
            canonical = normalize_skill(key)
            members = frozenset(normalize_skill(v) for v in values) - {canonical, ""}
            for member in {canonical} | members:
                if member in index:
                    raise ValueError(f"alias {member!r} appears in more than one group")
                index[member] = pos
            entries.append((canonical, members))
        return cls(entries=tuple(entries), _index=MappingProxyType(index))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._index

    def groups(self) -> List[FrozenSet[str]]:
        return [frozenset({key}) | values for key, values in self.entries]

    def same_group(self, a_key: str, b_key: str) -> bool:
        """True when both normalized keys belong to one group."""
        pos = self._index.get(a_key)
        return pos is not None and pos == self._index.get(b_key)

    def to_dict(self) -> Dict[str, List[str]]:
        return {key: sorted(values) for key, values in self.entries}


DEFAULT_ALIASES = AliasTable.from_mapping({
    "js": ["javascript"],
    "ts": ["typescript"],
    "py": ["python"],
    "react": ["reactjs", "reactnative"],
    "vue": ["vuejs"],
    "angular": ["angularjs"],
    "node": ["nodejs", "nodej"],
    "postgres": ["postgresql", "psql"],
    "mongo": ["mongodb"],
    "k8s": ["kubernetes"],
    "aws": ["amazonwebservices"],
    "gcp": ["googlecloud", "googlecloudplatform"],
    "ml": ["machinelearning"],
    "ai": ["artificialintelligence"],
    "css": ["css3"],
    "html": ["html5"],
    "cpp": ["c++", "cplusplus"],
    "csharp": ["c#"],
    "dotnet": [".net", "aspnet"],
})


def is_partial_match(a: str, b: str, aliases: AliasTable = DEFAULT_ALIASES) -> bool:
    """
    Related-but-not-identical skills: substring containment ("react" vs
    "react.js") or membership in one alias group ("k8s" vs "kubernetes").
    Exact matches are never partial.
    """
    ka = normalize_skill(a)
    kb = normalize_skill(b)
    if ka == kb:
        return False
    if ka and kb and (ka in kb or kb in ka):
        return True
    return aliases.same_group(ka, kb)
