"""
Rules and built-in argument binding for HornLog

Rule engines evaluate a rule body left to right and need every variable
passed to a built-in to have a value by the time the built-in runs, unless
the built-in itself is expected to bind it. When a Rule is created its body
is rewritten so that:

1. class atoms come first, then the other non-built-in atoms, then the
   built-in atoms, each group in its original order;
2. every built-in variable argument that no earlier atom binds is flagged
   unbound. The first built-in to mention such a variable binds it for all
   built-ins after it.

The head is never reordered.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Set, Tuple

from .atoms import Atom, BuiltInAtom, ClassAtom, RelationAtom, is_atom
from .resolver import IRIResolver
from .terms import BuiltInVariable
from .types import BuiltInNames

logger = logging.getLogger(__name__)


class RuleSection(Enum):
    BODY = "body"
    HEAD = "head"


def resolve_body_atoms(body_atoms: Sequence[Atom], resolver: IRIResolver) -> Tuple[Atom, ...]:
    """
    Reorder a rule body and flag unbound built-in arguments.

    Args:
        body_atoms: Body atoms in the order they were written
        resolver: Used to name the variables of non-built-in atoms

    Returns:
        The new body: class atoms, other non-built-in atoms, then built-in
        atoms with unbound arguments flagged. The input is left unchanged.

    Examples:
        >>> body = [builtin("swrlb:greaterThan", bvar("y"), bvar("z")),
        ...         relation(EX + "q", var(EX + "x"), var(EX + "y"))]
        >>> resolved = resolve_body_atoms(body, resolver)
        >>> resolved[1].arguments[1].unbound
        True
    """
    builtin_atoms: List[BuiltInAtom] = []
    class_atoms: List[Atom] = []
    other_atoms: List[Atom] = []
    # Variables used by non-built-in atoms are always bound
    names_bound_by_non_builtins: Set[str] = set()

    for atom in body_atoms:
        if isinstance(atom, BuiltInAtom):
            builtin_atoms.append(atom)
        elif isinstance(atom, ClassAtom):
            class_atoms.append(atom)
            names_bound_by_non_builtins.update(atom.get_variables(resolver))
        elif isinstance(atom, RelationAtom):
            other_atoms.append(atom)
            names_bound_by_non_builtins.update(atom.get_variables(resolver))
        else:
            raise TypeError(f"Expected a rule atom, got {type(atom).__name__}")

    names_bound_by_builtins: Set[str] = set()
    resolved_builtins = [
        _flag_unbound_arguments(atom, names_bound_by_non_builtins, names_bound_by_builtins)
        for atom in builtin_atoms
    ]

    result = tuple(class_atoms + other_atoms + resolved_builtins)
    logger.debug(f"Resolved body of {len(result)} atoms, "
                 f"{len(names_bound_by_builtins)} variables bound by built-ins")
    return result


def _flag_unbound_arguments(atom: BuiltInAtom,
                            names_bound_by_non_builtins: Set[str],
                            names_bound_by_builtins: Set[str]) -> BuiltInAtom:
    """Flag this built-in's unbound arguments; updates names_bound_by_builtins"""
    arguments = []
    changed = False
    for argument in atom.arguments:
        if isinstance(argument, BuiltInVariable):
            name = argument.name
            unbound = name not in names_bound_by_non_builtins and name not in names_bound_by_builtins
            if unbound:
                logger.debug(
                    f"Argument ?{name} of {atom.builtin_name} is unbound",
                    extra={
                        'extra_fields': {
                            'event_type': 'unbound_argument',
                            'builtin': atom.builtin_name,
                            'variable': name,
                        }
                    }
                )
                names_bound_by_builtins.add(name)
            # Flags supplied by the caller are recomputed
            if argument.unbound != unbound:
                argument = BuiltInVariable(name, unbound)
                changed = True
        arguments.append(argument)

    return atom.with_arguments(arguments) if changed else atom


@dataclass(frozen=True)
class Rule:
    """
    A named rule with a resolved body.

    Construction runs the binding analysis once; the resulting rule is
    immutable. The caller's atom sequences are copied, never modified.

    Args:
        name: Rule name
        body_atoms: Body atoms in written order
        head_atoms: Head atoms
        resolver: Identifier resolver, shared and read-only
        active: Whether the rule takes part in execution
        comment: Free-text comment

    Raises:
        TypeError: resolver is None, or an atom list holds a non-atom
    """
    name: str
    body_atoms: Tuple[Atom, ...]
    head_atoms: Tuple[Atom, ...]
    resolver: IRIResolver
    active: bool = True
    comment: str = ""

    def __init__(self, name: str, body_atoms: Iterable[Atom], head_atoms: Iterable[Atom],
                 resolver: IRIResolver, active: bool = True, comment: str = ""):
        if resolver is None:
            raise TypeError("Rule requires an identifier resolver")

        head_atoms = tuple(head_atoms)
        for atom in head_atoms:
            if not is_atom(atom):
                raise TypeError(f"Expected a rule atom, got {type(atom).__name__}")

        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'body_atoms', resolve_body_atoms(tuple(body_atoms), resolver))
        object.__setattr__(self, 'head_atoms', head_atoms)
        object.__setattr__(self, 'resolver', resolver)
        object.__setattr__(self, 'active', active)
        object.__setattr__(self, 'comment', comment)

    def builtin_atoms_in(self, section: RuleSection,
                         builtin_names: BuiltInNames) -> List[BuiltInAtom]:
        """
        Built-in atoms of the body or head whose name is in builtin_names.

        Order follows the section; an empty list if nothing matches.
        """
        atoms = self.body_atoms if section is RuleSection.BODY else self.head_atoms
        return [atom for atom in atoms
                if isinstance(atom, BuiltInAtom) and atom.builtin_name in builtin_names]

    def builtin_atoms_from_body(self, builtin_names: BuiltInNames) -> List[BuiltInAtom]:
        return self.builtin_atoms_in(RuleSection.BODY, builtin_names)

    def builtin_atoms_from_head(self, builtin_names: BuiltInNames) -> List[BuiltInAtom]:
        return self.builtin_atoms_in(RuleSection.HEAD, builtin_names)

    def get_variables(self) -> Set[str]:
        """Names of all variables in the rule"""
        variables: Set[str] = set()
        for atom in self.body_atoms + self.head_atoms:
            variables.update(atom.get_variables(self.resolver))
        return variables

    def unbound_variable_names(self) -> List[str]:
        """Variables that body built-ins have to bind, in binding order"""
        return [arg.name
                for atom in self.body_atoms if isinstance(atom, BuiltInAtom)
                for arg in atom.unbound_arguments]

    def to_rule_text(self) -> str:
        body = " ^ ".join(atom.render(self.resolver) for atom in self.body_atoms)
        head = " ^ ".join(atom.render(self.resolver) for atom in self.head_atoms)
        if not body:
            return f"-> {head}"
        return f"{body} -> {head}"

    def __str__(self) -> str:
        return self.to_rule_text()
