"""
Tests for atom arguments, atoms and their factory functions
"""
import pytest
from hornlog import (
    PrefixIRIResolver, AtomKind, ClassAtom, RelationAtom, BuiltInAtom,
    Variable, Individual, Literal, BuiltInVariable,
    var, bvar, individual, literal, class_atom, relation, builtin,
)
from hornlog.atoms import is_atom
from hornlog.terms import get_variable_names

EX = "http://example.org/rules#"


@pytest.fixture
def resolver():
    return PrefixIRIResolver(default_namespace=EX)


class TestArguments:
    """Test argument values"""

    def test_variable_name_via_resolver(self, resolver):
        x = var(EX + "x")
        assert x.is_variable
        assert x.variable_name(resolver) == "x"
        assert x.render(resolver) == "?x"

    def test_builtin_variable(self, resolver):
        y = bvar("y")
        assert y.is_variable
        assert y.unbound is False
        assert y.variable_name(resolver) == "y"
        assert y.render(resolver) == "?y"

    def test_as_unbound_returns_new_value(self):
        y = bvar("y")
        flagged = y.as_unbound()
        assert flagged.unbound is True
        assert y.unbound is False
        assert flagged.as_unbound() is flagged
        assert flagged != y

    def test_constants_have_no_variable(self, resolver):
        assert individual(EX + "alice").variable_name(resolver) is None
        assert literal(3).variable_name(resolver) is None
        assert not individual(EX + "alice").is_variable

    def test_individual_render(self, resolver):
        assert individual(EX + "alice").render(resolver) == "alice"

    def test_arguments_are_immutable(self):
        with pytest.raises(AttributeError):
            bvar("y").unbound = True

    def test_get_variable_names(self, resolver):
        args = [var(EX + "x"), bvar("y"), literal("s"), individual(EX + "a")]
        assert get_variable_names(args, resolver) == {"x", "y"}


class TestLiterals:
    """Test literal construction and rendering"""

    def test_literal_datatypes(self):
        assert literal(42) == Literal("42", "xsd:long")
        assert literal(2.5) == Literal("2.5", "xsd:double")
        assert literal(True) == Literal("true", "xsd:boolean")
        assert literal("hi") == Literal("hi", "xsd:string")
        assert literal("7", "xsd:int") == Literal("7", "xsd:int")

    def test_render(self, resolver):
        assert literal(42).render(resolver) == "42"
        assert literal(False).render(resolver) == "false"
        assert literal('say "hi"').render(resolver) == '"say \\"hi\\""'
        assert literal("2024-01-01", "xsd:date").render(resolver) == '"2024-01-01"^^xsd:date'

    def test_str(self):
        assert str(literal("hi")) == '"hi"'
        assert str(literal(1)) == "1"


class TestAtoms:
    """Test the three atom kinds"""

    def test_kinds(self):
        assert class_atom(EX + "A", var(EX + "x")).kind is AtomKind.CLASS
        assert relation(EX + "p", var(EX + "x")).kind is AtomKind.RELATION
        assert builtin("swrlb:add", bvar("x")).kind is AtomKind.BUILT_IN

    def test_class_atom(self, resolver):
        atom = class_atom(EX + "Person", var(EX + "p"))
        assert isinstance(atom, ClassAtom)
        assert atom.arguments == (var(EX + "p"),)
        assert atom.get_variables(resolver) == {"p"}
        assert atom.render(resolver) == "Person(?p)"

    def test_relation_atom(self, resolver):
        atom = relation(EX + "hasAge", var(EX + "p"), literal(30))
        assert isinstance(atom, RelationAtom)
        assert atom.arguments == (var(EX + "p"), literal(30))
        assert atom.render(resolver) == "hasAge(?p, 30)"

    def test_builtin_atom(self, resolver):
        atom = builtin("swrlb:add", bvar("z"), bvar("x"), literal(1))
        assert isinstance(atom, BuiltInAtom)
        assert atom.get_variables(resolver) == {"z", "x"}
        assert atom.unbound_arguments == ()
        assert atom.render(resolver) == "swrlb:add(?z, ?x, 1)"

    def test_builtin_with_arguments(self):
        atom = builtin("swrlb:add", bvar("z"), bvar("x"))
        flagged = atom.with_arguments([bvar("z").as_unbound(), bvar("x")])
        assert flagged.builtin_name == "swrlb:add"
        assert flagged.unbound_arguments == (BuiltInVariable("z", True),)
        assert atom.unbound_arguments == ()

    def test_builtin_rejects_plain_variable(self):
        with pytest.raises(TypeError):
            BuiltInAtom("swrlb:add", [Variable(EX + "z")])
        with pytest.raises(TypeError):
            builtin("swrlb:add", bvar("z")).with_arguments([var(EX + "z")])

    def test_builtin_name_required(self):
        with pytest.raises(ValueError):
            BuiltInAtom("", [])

    def test_atoms_are_values(self):
        assert relation(EX + "p", var(EX + "x")) == RelationAtom(EX + "p", (Variable(EX + "x"),))
        assert hash(builtin("f", bvar("x"))) == hash(builtin("f", bvar("x")))
        assert class_atom(EX + "A", individual(EX + "a")) == ClassAtom(EX + "A", Individual(EX + "a"))

    def test_is_atom(self):
        assert is_atom(class_atom(EX + "A", var(EX + "x")))
        assert is_atom(builtin("f"))
        assert not is_atom(var(EX + "x"))
        assert not is_atom("A(?x)")
