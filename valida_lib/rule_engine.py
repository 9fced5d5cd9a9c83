"""
Rule Engine - name -> predicate registry

Holds the rules a validator can run and invokes them safely:

- Unknown rule names pass (with a warning), so a typo in a schema never
  blocks a legitimate submission.
- A predicate that raises is treated as a failure for that field. The error
  is logged and never reaches the caller.
- Registering something that is not callable raises immediately.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .predicates import DEFAULT_RULES

logger = logging.getLogger(__name__)


class RuleEngine:
    """Manages and executes validation rules"""

    def __init__(
        self,
        rules: Optional[Mapping[str, Callable]] = None,
        register_defaults: bool = True,
    ):
        """
        Initialize the registry.

        Args:
            rules: Extra rules to register after the defaults
            register_defaults: Populate the registry with the built-in catalog
        """
        self.rules: Dict[str, Callable] = {}

        if register_defaults:
            self.register_default_rules()

        for name, predicate in (rules or {}).items():
            self.register(name, predicate)

    def register_default_rules(self) -> None:
        """Register every predicate from the built-in catalog."""
        for name, predicate in DEFAULT_RULES.items():
            self.register(name, predicate)

    def register(self, name: str, predicate: Callable) -> None:
        """
        Register a rule, replacing any existing rule with the same name.

        Raises:
            TypeError: If predicate is not callable
        """
        if not callable(predicate):
            raise TypeError(
                f'Validator for rule "{name}" must be callable, '
                f"got {type(predicate).__name__}"
            )
        self.rules[name] = predicate
        logger.debug(f'Registered validation rule "{name}"')

    def validate(
        self,
        rule_name: str,
        value: Any,
        params: Optional[Sequence[str]] = None,
        all_values: Optional[Mapping[str, Any]] = None,
        field_name: str = "",
    ) -> bool:
        """
        Run one rule against a value.

        Args:
            rule_name: Registered rule name (e.g. "min")
            value: The field's current value
            params: Rule parameters as strings
            all_values: Complete value set for cross-field rules
            field_name: Name of the field being validated

        Returns:
            True if the rule passes or is unknown, False if it fails or raises
        """
        try:
            predicate = self.rules.get(rule_name)
        except TypeError:
            # Unhashable structured rule
            predicate = None

        if predicate is None:
            logger.warning(f'Validation rule "{rule_name}" not found')
            return True

        try:
            return bool(
                predicate(
                    value,
                    list(params or []),
                    all_values if all_values is not None else {},
                    field_name,
                )
            )
        except Exception as e:
            logger.error(
                f'Error executing validation rule "{rule_name}" '
                f'on field "{field_name}": {type(e).__name__}: {e}',
                exc_info=True,
            )
            return False

    def has(self, rule_name: str) -> bool:
        return rule_name in self.rules

    def get_all_rules(self) -> List[str]:
        """Return registered rule names in registration order."""
        return list(self.rules)

    def unregister(self, rule_name: str) -> bool:
        """Remove a rule. Returns True if it was registered."""
        if rule_name in self.rules:
            del self.rules[rule_name]
            return True
        return False
