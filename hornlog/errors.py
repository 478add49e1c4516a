"""
Exceptions raised while tokenizing rule text.
"""


class RuleParseError(Exception):
    """Rule text is syntactically invalid."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IncompleteRuleError(RuleParseError):
    """
    Rule text is valid so far but ends too early.

    Only raised by tokenizers running in interactive mode; otherwise the
    same condition is reported as a plain RuleParseError.
    """
