"""
Rule atoms for HornLog

An atom is one conjunct of a rule body or head. There are exactly three
kinds, and code that handles atoms is expected to cover all of them:

- ClassAtom: class membership, e.g. Person(?p)
- RelationAtom: any other non-built-in atom, e.g. hasAge(?p, ?a)
- BuiltInAtom: a built-in predicate call, e.g. swrlb:add(?z, ?x, 1)
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Sequence, Set, Tuple, Union

from .resolver import IRIResolver
from .terms import Argument, BuiltInVariable, get_variable_names


class AtomKind(Enum):
    CLASS = "class"
    RELATION = "relation"
    BUILT_IN = "built_in"


@dataclass(frozen=True)
class ClassAtom:
    """Asserts that the argument is a member of a class"""
    class_iri: str
    argument: Argument

    kind: ClassVar[AtomKind] = AtomKind.CLASS

    @property
    def arguments(self) -> Tuple[Argument, ...]:
        return (self.argument,)

    def get_variables(self, resolver: IRIResolver) -> Set[str]:
        return get_variable_names(self.arguments, resolver)

    def render(self, resolver: IRIResolver) -> str:
        name = resolver.iri_to_prefixed_name(self.class_iri)
        return f"{name}({self.argument.render(resolver)})"


@dataclass(frozen=True)
class RelationAtom:
    """Object or data property atom, or any other relational test"""
    predicate_iri: str
    arguments: Tuple[Argument, ...]

    kind: ClassVar[AtomKind] = AtomKind.RELATION

    def __init__(self, predicate_iri: str, arguments: Sequence[Argument]):
        object.__setattr__(self, 'predicate_iri', predicate_iri)
        object.__setattr__(self, 'arguments', tuple(arguments))

    def get_variables(self, resolver: IRIResolver) -> Set[str]:
        return get_variable_names(self.arguments, resolver)

    def render(self, resolver: IRIResolver) -> str:
        name = resolver.iri_to_prefixed_name(self.predicate_iri)
        args = ", ".join(arg.render(resolver) for arg in self.arguments)
        return f"{name}({args})"


@dataclass(frozen=True)
class BuiltInAtom:
    """
    A call to a built-in predicate.

    `builtin_name` is the prefixed name the built-in is registered under,
    e.g. "swrlb:greaterThan". Built-ins can bind their variable arguments,
    which is why they are the only atoms whose arguments can be unbound.
    """
    builtin_name: str
    arguments: Tuple[Argument, ...]

    kind: ClassVar[AtomKind] = AtomKind.BUILT_IN

    def __init__(self, builtin_name: str, arguments: Sequence[Argument]):
        if not builtin_name:
            raise ValueError("Built-in atom name cannot be empty")
        arguments = tuple(arguments)
        for argument in arguments:
            if argument.is_variable and not isinstance(argument, BuiltInVariable):
                raise TypeError(f"Variable arguments of built-in {builtin_name} "
                                f"must be BuiltInVariable, got {type(argument).__name__}")
        object.__setattr__(self, 'builtin_name', builtin_name)
        object.__setattr__(self, 'arguments', arguments)

    def with_arguments(self, arguments: Sequence[Argument]) -> "BuiltInAtom":
        return BuiltInAtom(self.builtin_name, arguments)

    @property
    def unbound_arguments(self) -> Tuple[BuiltInVariable, ...]:
        return tuple(arg for arg in self.arguments
                     if isinstance(arg, BuiltInVariable) and arg.unbound)

    def get_variables(self, resolver: IRIResolver) -> Set[str]:
        return get_variable_names(self.arguments, resolver)

    def render(self, resolver: IRIResolver) -> str:
        args = ", ".join(arg.render(resolver) for arg in self.arguments)
        return f"{self.builtin_name}({args})"


Atom = Union[ClassAtom, RelationAtom, BuiltInAtom]

ATOM_TYPES = (ClassAtom, RelationAtom, BuiltInAtom)


def is_atom(value) -> bool:
    return isinstance(value, ATOM_TYPES)
