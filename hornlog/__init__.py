"""
HornLog - tokenizing and binding analysis for Horn-clause rules over ontologies

Tokenizes rule text such as ``Person(?p) ^ hasAge(?p, ?a) -> Adult(?p)``
(including the Unicode operator glyphs and <IRI> names) and prepares rules
for left-to-right rule engines by ordering their bodies and flagging the
built-in arguments that must be bound by the built-in itself.
"""

from .tokens import Token, TokenKind, AND_CHAR, IMP_CHAR, RING_CHAR
from .errors import RuleParseError, IncompleteRuleError
from .tokenizer import Tokenizer, tokenize
from .terms import Argument, Variable, Individual, Literal, BuiltInVariable
from .atoms import Atom, AtomKind, ClassAtom, RelationAtom, BuiltInAtom
from .resolver import IRIResolver, PrefixIRIResolver
from .rules import Rule, RuleSection, resolve_body_atoms
from .factories import var, bvar, individual, literal, class_atom, relation, builtin
from .config import HornLogConfig, get_config, set_config, reset_config

__version__ = "0.1"
__all__ = [
    "Token", "TokenKind", "AND_CHAR", "IMP_CHAR", "RING_CHAR",
    "RuleParseError", "IncompleteRuleError",
    "Tokenizer", "tokenize",
    "Argument", "Variable", "Individual", "Literal", "BuiltInVariable",
    "Atom", "AtomKind", "ClassAtom", "RelationAtom", "BuiltInAtom",
    "IRIResolver", "PrefixIRIResolver",
    "Rule", "RuleSection", "resolve_body_atoms",
    "var", "bvar", "individual", "literal", "class_atom", "relation", "builtin",
    "HornLogConfig", "get_config", "set_config", "reset_config",
]
