import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .config_loader import check_options
from .messages import format_message, resolve_message
from .parser import normalize_schema, parse_schema
from .rule_engine import RuleEngine

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = {
    "realtime": True,
    "validate_on_blur": True,
    "validate_on_input": True,
    "validate_on_submit": True,
    "messages": {},
}


class Validator:
    """Core validation state machine, independent of any UI binding"""

    def __init__(
        self,
        schema: Mapping[str, Any],
        options: Optional[Dict[str, Any]] = None,
        rule_engine: Optional[RuleEngine] = None,
    ):
        """
        Initialize validator with a schema and options.

        Args:
            schema: Field name -> rule specification (list of tokens,
                pipe-delimited string, or a single rule)
            options: Validator options (see DEFAULT_OPTIONS)
            rule_engine: Shared RuleEngine; a private one is created if omitted

        Raises:
            ValueError: If options contain unknown keys or wrong types
        """
        options = dict(options or {})
        check_options(options)

        self.options = {**DEFAULT_OPTIONS, **options}
        self.messages = dict(self.options["messages"])
        self.rule_engine = rule_engine if rule_engine is not None else RuleEngine()

        self.schema = normalize_schema(schema)
        # Tokens are parsed once; evaluation walks these lists in order
        self.rules = parse_schema(self.schema)

        self.errors: Dict[str, str] = {}
        self.touched: Dict[str, bool] = {}
        self.values: Dict[str, Any] = {}

    def validate_field(
        self,
        field_name: str,
        value: Any,
        all_values: Optional[Mapping[str, Any]] = None,
    ) -> Optional[str]:
        """
        Validate one field, stopping at its first failing rule.

        Args:
            field_name: Field declared in the schema
            value: The field's current value
            all_values: Complete value set for cross-field rules

        Returns:
            The formatted error message, or None if every rule passed
            (or the field is not in the schema)
        """
        rules = self.rules.get(field_name)
        if rules is None:
            return None

        all_values = all_values if all_values is not None else {}
        self.errors.pop(field_name, None)

        for rule in rules:
            name, params = rule["name"], rule["params"]
            is_valid = self.rule_engine.validate(
                name, value, params, all_values, field_name
            )

            if not is_valid:
                self.errors[field_name] = self.get_error_message(
                    field_name, name, params
                )
                logger.debug(f'Field "{field_name}" failed rule "{name}"')
                break

        return self.errors.get(field_name)

    def validate_all(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate every field declared in the schema.

        Fields missing from values are validated as None.

        Returns:
            Dict with "is_valid" (bool) and "errors" (field -> message)
        """
        self.errors = {}
        self.values = dict(values)

        for field_name in self.rules:
            self.validate_field(field_name, values.get(field_name), values)

        return {
            "is_valid": not self.errors,
            "errors": dict(self.errors),
        }

    def get_error_message(self, field_name: str, rule_name: Any, params: List[str]) -> str:
        return resolve_message(field_name, rule_name, params, self.messages)

    def format_message(self, message: str, field_name: str, params: Optional[List[str]] = None) -> str:
        return format_message(message, field_name, params)

    # Event entry points for adapters

    def handle_blur(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        """Mark the field touched and validate it if validate_on_blur is set."""
        self.touch(field_name)
        if not self.options["validate_on_blur"]:
            return self.get_field_error(field_name)
        return self.validate_field(field_name, values.get(field_name), values)

    def handle_input(self, field_name: str, values: Mapping[str, Any]) -> Optional[str]:
        """Re-validate a touched field on input if validate_on_input is set."""
        if not (self.options["validate_on_input"] and self.is_touched(field_name)):
            return self.get_field_error(field_name)
        return self.validate_field(field_name, values.get(field_name), values)

    def handle_submit(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate the whole schema on submit and touch every field.

        When validate_on_submit is off nothing is evaluated and the current
        state is returned.
        """
        if not self.options["validate_on_submit"]:
            return {"is_valid": not self.errors, "errors": dict(self.errors)}

        result = self.validate_all(values)
        for field_name in self.rules:
            self.touch(field_name)
        return result

    # Extension point

    def register_rule(self, name: str, predicate: Callable) -> None:
        self.rule_engine.register(name, predicate)

    def unregister_rule(self, name: str) -> bool:
        return self.rule_engine.unregister(name)

    # State

    def touch(self, field_name: str) -> None:
        self.touched[field_name] = True

    def is_touched(self, field_name: str) -> bool:
        return bool(self.touched.get(field_name))

    def get_all_values(self) -> Mapping[str, Any]:
        return self.values

    def clear_errors(self) -> None:
        self.errors = {}

    def clear_field_error(self, field_name: str) -> None:
        self.errors.pop(field_name, None)

    def get_errors(self) -> Dict[str, str]:
        return self.errors

    def has_errors(self) -> bool:
        return bool(self.errors)

    def get_field_error(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)

    def reset(self) -> None:
        """Clear errors, touched state and stored values. Rules and schema stay."""
        self.errors = {}
        self.touched = {}
        self.values = {}
