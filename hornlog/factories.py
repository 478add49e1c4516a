"""
Factory functions for creating HornLog arguments and atoms.

A grammar layer builds atoms from tokens with these; they are also handy
in tests and when assembling rules programmatically.
"""

from typing import Optional

from .atoms import BuiltInAtom, ClassAtom, RelationAtom
from .terms import Argument, BuiltInVariable, Individual, Literal, Variable


def var(iri: str) -> Variable:
    """
    Create a variable for use in class and relation atoms.

    Examples:
        >>> var("http://example.org/rules#x")
        Variable(iri='http://example.org/rules#x')
    """
    return Variable(iri)


def bvar(name: str) -> BuiltInVariable:
    """
    Create a built-in variable argument, named by its short name.

    Examples:
        >>> bvar("x")
        BuiltInVariable(name='x', unbound=False)
    """
    return BuiltInVariable(name)


def individual(iri: str) -> Individual:
    return Individual(iri)


def literal(value, datatype: Optional[str] = None) -> Literal:
    """
    Create a literal, picking the datatype from the Python value if not given.

    Examples:
        >>> literal(42)
        Literal(lexical='42', datatype='xsd:long')
        >>> literal(True)
        Literal(lexical='true', datatype='xsd:boolean')
        >>> literal("2024-01-01", "xsd:date")
        Literal(lexical='2024-01-01', datatype='xsd:date')
    """
    if isinstance(value, bool):
        return Literal("true" if value else "false", datatype or "xsd:boolean")
    if isinstance(value, int):
        return Literal(str(value), datatype or "xsd:long")
    if isinstance(value, float):
        return Literal(repr(value), datatype or "xsd:double")
    return Literal(str(value), datatype or "xsd:string")


def class_atom(class_iri: str, argument: Argument) -> ClassAtom:
    return ClassAtom(class_iri, argument)


def relation(predicate_iri: str, *args: Argument) -> RelationAtom:
    """
    Create a relation atom.

    Examples:
        >>> relation(EX + "hasAge", var(EX + "p"), var(EX + "a"))
    """
    return RelationAtom(predicate_iri, list(args))


def builtin(builtin_name: str, *args: Argument) -> BuiltInAtom:
    """
    Create a built-in call.

    Examples:
        >>> builtin("swrlb:add", bvar("z"), bvar("x"), literal(1))
    """
    return BuiltInAtom(builtin_name, list(args))
