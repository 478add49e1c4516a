"""
Identifier resolution: mapping full IRIs to short display names.

Rules only need one lookup from their resolver, so any object with an
`iri_to_prefixed_name` method will do. PrefixIRIResolver is the stock
implementation backed by a prefix table.
"""

from typing import Mapping, Optional, Protocol, Tuple

from .types import PrefixMap


STANDARD_PREFIXES: PrefixMap = {
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "owl": "http://www.w3.org/2002/07/owl#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "swrl": "http://www.w3.org/2003/11/swrl#",
    "swrlb": "http://www.w3.org/2003/11/swrlb#",
}


class IRIResolver(Protocol):
    """
    Anything that can shorten an IRI.

    Implementations are shared between rules and must allow concurrent
    read-only lookups.
    """

    def iri_to_prefixed_name(self, iri: str) -> str:
        ...


class PrefixIRIResolver:
    """
    Resolve IRIs against a table of namespace prefixes.

    The longest matching namespace wins. IRIs in the default namespace are
    shortened to their bare local name; IRIs matching no namespace are
    returned unchanged.

    Args:
        prefixes: Prefix label to namespace IRI. Merged over the standard
                  rdf/rdfs/owl/xsd/swrl/swrlb prefixes.
        default_namespace: Namespace whose IRIs render without a prefix

    Examples:
        >>> r = PrefixIRIResolver({"fam": "http://example.org/family#"})
        >>> r.iri_to_prefixed_name("http://example.org/family#hasParent")
        'fam:hasParent'
        >>> r.iri_to_prefixed_name("http://www.w3.org/2003/11/swrlb#add")
        'swrlb:add'
    """

    def __init__(self, prefixes: Optional[Mapping[str, str]] = None,
                 default_namespace: Optional[str] = None):
        table = dict(STANDARD_PREFIXES)
        table.update(prefixes or {})
        self._prefixes: PrefixMap = table
        self._default_namespace = default_namespace

        # Longest namespace first so nested namespaces shadow their parents
        candidates = [(namespace, prefix) for prefix, namespace in table.items()]
        if default_namespace:
            candidates.append((default_namespace, None))
        self._namespaces: Tuple[Tuple[str, Optional[str]], ...] = tuple(
            sorted(candidates, key=lambda item: len(item[0]), reverse=True)
        )

    @classmethod
    def from_config(cls, config) -> "PrefixIRIResolver":
        """Create from a ResolverConfig"""
        return cls(config.prefixes, config.default_namespace)

    @property
    def prefixes(self) -> PrefixMap:
        return dict(self._prefixes)

    @property
    def default_namespace(self) -> Optional[str]:
        return self._default_namespace

    def iri_to_prefixed_name(self, iri: str) -> str:
        for namespace, prefix in self._namespaces:
            if iri.startswith(namespace) and len(iri) > len(namespace):
                local_name = iri[len(namespace):]
                if prefix is None:
                    return local_name
                return f"{prefix}:{local_name}"
        return iri

    def prefixed_name_to_iri(self, name: str) -> str:
        """
        Expand a short name back to its IRI.

        Names without a known prefix are resolved against the default
        namespace if there is one, otherwise returned unchanged.
        """
        prefix, sep, local_name = name.partition(":")
        if sep and prefix in self._prefixes:
            return self._prefixes[prefix] + local_name
        if not sep and self._default_namespace:
            return self._default_namespace + name
        return name
