"""Exceptions raised by slavic_namecase."""


class NameCaseError(Exception):
    """Base class for all library errors."""


class ContractViolation(NameCaseError, TypeError):
    """A value of the wrong type was passed where a NameWord, LanguageModule or Gender is required."""


class UnknownRuleReference(NameCaseError, LookupError):
    """A language module's rule table references a rule that does not exist."""


class UnknownLanguageError(NameCaseError, ValueError):
    """No language module is registered under the requested code."""
