"""
Atom arguments for HornLog rules

This module defines the values that can appear inside an atom:
- Variable: a rule variable in a class or relation atom, named by IRI
- Individual: a named individual or other entity constant
- Literal: a data value with its datatype
- BuiltInVariable: a variable argument of a built-in call, which may be
  flagged unbound (the built-in must produce its value)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Optional, Set

from .resolver import IRIResolver


class Argument(ABC):
    """Abstract base class for all atom arguments"""

    @property
    def is_variable(self) -> bool:
        return False

    @abstractmethod
    def variable_name(self, resolver: IRIResolver) -> Optional[str]:
        """
        Short name of the variable this argument refers to.

        Args:
            resolver: Maps variable IRIs to short names

        Returns:
            The variable's name, or None for constants
        """
        pass

    @abstractmethod
    def render(self, resolver: IRIResolver) -> str:
        """Rule text for this argument"""
        pass


@dataclass(frozen=True)
class Variable(Argument):
    """A variable identified by IRI"""
    iri: str

    @property
    def is_variable(self) -> bool:
        return True

    def variable_name(self, resolver: IRIResolver) -> Optional[str]:
        return resolver.iri_to_prefixed_name(self.iri)

    def render(self, resolver: IRIResolver) -> str:
        return f"?{self.variable_name(resolver)}"

    def __str__(self) -> str:
        return f"?<{self.iri}>"


@dataclass(frozen=True)
class Individual(Argument):
    """A named individual (or class/property used as a value)"""
    iri: str

    def variable_name(self, resolver: IRIResolver) -> Optional[str]:
        return None

    def render(self, resolver: IRIResolver) -> str:
        return resolver.iri_to_prefixed_name(self.iri)

    def __str__(self) -> str:
        return f"<{self.iri}>"


@dataclass(frozen=True)
class Literal(Argument):
    """A data value in lexical form, tagged with its datatype"""
    lexical: str
    datatype: str = "xsd:string"

    @property
    def is_quoted(self) -> bool:
        """Strings and other non-numeric types are written in quotes"""
        return self.datatype not in _UNQUOTED_DATATYPES

    def variable_name(self, resolver: IRIResolver) -> Optional[str]:
        return None

    def render(self, resolver: IRIResolver) -> str:
        if not self.is_quoted:
            return self.lexical
        escaped = self.lexical.replace('\\', '\\\\').replace('"', '\\"')
        if self.datatype == "xsd:string":
            return f'"{escaped}"'
        return f'"{escaped}"^^{self.datatype}'

    def __str__(self) -> str:
        return self.render(_NO_PREFIXES)


@dataclass(frozen=True)
class BuiltInVariable(Argument):
    """
    Variable argument of a built-in call.

    `unbound` tells the built-in implementation that no earlier atom gives
    this variable a value, so the built-in has to bind it. The flag is only
    ever set through as_unbound(), which returns a new argument.
    """
    name: str
    unbound: bool = False

    @property
    def is_variable(self) -> bool:
        return True

    def as_unbound(self) -> "BuiltInVariable":
        if self.unbound:
            return self
        return replace(self, unbound=True)

    def variable_name(self, resolver: IRIResolver) -> Optional[str]:
        return self.name

    def render(self, resolver: IRIResolver) -> str:
        return f"?{self.name}"

    def __str__(self) -> str:
        return f"?{self.name}"


class _IdentityResolver:
    def iri_to_prefixed_name(self, iri: str) -> str:
        return iri


_NO_PREFIXES = _IdentityResolver()

_UNQUOTED_DATATYPES = frozenset({
    "xsd:boolean", "xsd:byte", "xsd:short", "xsd:int", "xsd:long",
    "xsd:integer", "xsd:decimal", "xsd:float", "xsd:double",
})


def get_variable_names(arguments, resolver: IRIResolver) -> Set[str]:
    """
    Collect the variable names referenced by a sequence of arguments.

    Examples:
        >>> get_variable_names([BuiltInVariable("x"), Literal("3", "xsd:long")], resolver)
        {'x'}
    """
    names = set()
    for argument in arguments:
        name = argument.variable_name(resolver)
        if name is not None:
            names.add(name)
    return names
