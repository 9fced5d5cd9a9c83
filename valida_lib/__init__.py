"""
valida-lib: Declarative, string-rule-based data validation

Each field of a form or payload is given an ordered list of rule tokens
such as "required", "min:8" or "same:password". Rules run in order and the
first failure produces a human-readable message.

This library provides:
- A catalog of Laravel-style rules with a runtime-extensible registry
- Per-field and whole-schema validation with touched/error state
- Message overrides and placeholder formatting
- Named forms loaded from YAML/JSON config (local or remote)
- A JSON-RPC server for non-Python front ends

Example:
    from valida_lib import Validator

    validator = Validator({
        "email": "required|email",
        "password": ["required", "min:8"],
        "password_confirmation": ["required", "same:password"],
    })
    result = validator.validate_all(form_data)
"""

from .api import ValidationService
from .messages import DEFAULT_MESSAGES, format_message
from .parser import normalize_schema, parse_rule, parse_schema
from .rule_engine import RuleEngine
from .validator import Validator

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_MESSAGES",
    "RuleEngine",
    "ValidationService",
    "Validator",
    "format_message",
    "normalize_schema",
    "parse_rule",
    "parse_schema",
]
