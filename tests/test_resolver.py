"""
Tests for IRI to short name resolution
"""
import pytest
from hornlog import PrefixIRIResolver, HornLogConfig
from hornlog.config import ResolverConfig
from hornlog.resolver import STANDARD_PREFIXES


class TestPrefixIRIResolver:
    """Test prefix-based IRI shortening"""

    def test_standard_prefixes(self):
        resolver = PrefixIRIResolver()
        assert resolver.iri_to_prefixed_name(STANDARD_PREFIXES["swrlb"] + "add") == "swrlb:add"
        assert resolver.iri_to_prefixed_name(STANDARD_PREFIXES["xsd"] + "int") == "xsd:int"

    def test_custom_prefix(self):
        resolver = PrefixIRIResolver({"fam": "http://example.org/family#"})
        assert resolver.iri_to_prefixed_name("http://example.org/family#hasParent") == "fam:hasParent"

    def test_default_namespace(self):
        resolver = PrefixIRIResolver(default_namespace="http://example.org/rules#")
        assert resolver.iri_to_prefixed_name("http://example.org/rules#x") == "x"

    def test_unknown_iri_unchanged(self):
        resolver = PrefixIRIResolver()
        assert resolver.iri_to_prefixed_name("http://other.org/thing") == "http://other.org/thing"

    def test_namespace_alone_unchanged(self):
        """An IRI equal to a namespace has no local name to show"""
        resolver = PrefixIRIResolver({"ex": "http://example.org/#"})
        assert resolver.iri_to_prefixed_name("http://example.org/#") == "http://example.org/#"

    def test_longest_namespace_wins(self):
        resolver = PrefixIRIResolver({
            "ex": "http://example.org/",
            "exa": "http://example.org/a/",
        })
        assert resolver.iri_to_prefixed_name("http://example.org/a/b") == "exa:b"
        assert resolver.iri_to_prefixed_name("http://example.org/c") == "ex:c"

    def test_prefix_overrides_standard(self):
        resolver = PrefixIRIResolver({"swrlb": "http://example.org/builtins#"})
        assert resolver.iri_to_prefixed_name("http://example.org/builtins#add") == "swrlb:add"
        assert resolver.prefixes["swrlb"] == "http://example.org/builtins#"

    def test_prefixed_name_to_iri(self):
        resolver = PrefixIRIResolver({"fam": "http://example.org/family#"},
                                     default_namespace="http://example.org/rules#")
        assert resolver.prefixed_name_to_iri("fam:hasParent") == "http://example.org/family#hasParent"
        assert resolver.prefixed_name_to_iri("x") == "http://example.org/rules#x"
        assert resolver.prefixed_name_to_iri("unknown:x") == "unknown:x"

    def test_from_config(self):
        config = HornLogConfig(resolver=ResolverConfig(
            prefixes={"fam": "http://example.org/family#"},
            default_namespace="http://example.org/rules#",
        ))
        resolver = PrefixIRIResolver.from_config(config.resolver)
        assert resolver.default_namespace == "http://example.org/rules#"
        assert resolver.iri_to_prefixed_name("http://example.org/family#p") == "fam:p"
        assert resolver.iri_to_prefixed_name("http://example.org/rules#p") == "p"
