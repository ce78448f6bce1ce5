"""Validators: the rule engine and its batch extension."""

from paramcheck.application.validators.batch import BatchValidator
from paramcheck.application.validators.validator import PatternSource, Validator

__all__ = [
    "BatchValidator",
    "PatternSource",
    "Validator",
]
