"""
Public API for valida-lib

This is the "front door" - the main entry point for validating named forms
configured in local-config.yaml.
"""

import json
import logging
import time
import urllib.parse
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from .config_loader import ConfigLoader
from .rule_engine import RuleEngine
from .validator import Validator

logger = logging.getLogger(__name__)


class ValidationService:
    """
    Main validation service class.

    Builds one Validator per configured form. All forms share a single
    RuleEngine, so a rule registered here is available to every form and
    survives config reloads.

    Example:
        from valida_lib import ValidationService

        service = ValidationService()
        result = service.validate("registration", form_data)
        if not result["is_valid"]:
            for field, message in result["errors"].items():
                print(f"{field}: {message}")
    """

    # Debounce interval: how often the staleness check runs (seconds)
    CHECK_INTERVAL = 300

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize validation service.

        Args:
            config_path: Config file to use instead of the bundled one

        Raises:
            ValueError: If the config or a form schema is invalid
            RuntimeError: If a remote form schema cannot be fetched
        """
        self.config_path = config_path
        self.rule_engine = RuleEngine()
        self._initialize()

    def _initialize(self):
        """
        Internal initialization logic (used by __init__ and reload_config).

        The new config and forms are swapped in only once every form has
        loaded; on failure the previous state is kept.
        """
        try:
            config_loader = ConfigLoader(self.config_path)

            options = config_loader.get_options()
            global_messages = config_loader.get_messages()

            forms: Dict[str, Dict[str, Any]] = {}
            validators: Dict[str, Validator] = {}

            for form_name in config_loader.get_form_uris():
                document = config_loader.load_form(form_name)
                messages = {**global_messages, **(document.get("messages") or {})}

                forms[form_name] = document
                validators[form_name] = Validator(
                    document["fields"],
                    {**options, "messages": messages},
                    rule_engine=self.rule_engine,
                )
                logger.debug(
                    f"Loaded form {form_name} ({len(document['fields'])} fields)"
                )
        except Exception as e:
            logger.error(f"Failed to load config {self.config_path or 'bundled'}: {e}")
            raise

        self.config_loader = config_loader
        self.forms = forms
        self.validators = validators
        self._last_check_time = time.time()

    def _check_and_reload_if_stale(self):
        """
        Reload config when it is older than config_max_age_seconds.

        Checks at most every CHECK_INTERVAL seconds. A failed reload keeps
        serving the last good forms and is retried at the next check.
        """
        max_age = self.config_loader.get_max_age()
        if max_age is None:
            return

        now = time.time()
        if now - self._last_check_time < self.CHECK_INTERVAL:
            return
        self._last_check_time = now

        age = self.config_loader.get_config_age()
        if age > max_age:
            logger.info(f"Config stale ({age:.0f}s > {max_age}s), reloading")
            try:
                self.reload_config()
            except (ValueError, RuntimeError, OSError, yaml.YAMLError) as e:
                logger.warning(f"Config reload failed, keeping previous forms: {e}")

    def _get_validator(self, form_name: str) -> Validator:
        if form_name not in self.validators:
            raise ValueError(f"Unknown form: {form_name}")
        return self.validators[form_name]

    def validate(self, form_name: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate a complete set of form values.

        Args:
            form_name: Configured form (e.g. "registration")
            values: Field name -> current value

        Returns:
            Dict with:
                - is_valid: True if no field failed
                - errors: Field name -> first error message

        Raises:
            ValueError: If form_name is not configured
        """
        self._check_and_reload_if_stale()
        return self._get_validator(form_name).validate_all(values)

    def validate_field(
        self,
        form_name: str,
        field_name: str,
        value: Any,
        values: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        """
        Validate a single field of a form.

        Args:
            form_name: Configured form
            field_name: Field to validate
            value: The field's current value
            values: Other field values for cross-field rules

        Returns:
            Error message, or None if the field is valid
        """
        self._check_and_reload_if_stale()
        values = dict(values or {})
        values.setdefault(field_name, value)
        return self._get_validator(form_name).validate_field(field_name, value, values)

    def batch_validate(
        self, records: List[Dict[str, Any]], form_name: str, id_fields: List[str]
    ) -> List[Dict[str, Any]]:
        """
        Validate many records against the same form.

        Args:
            records: List of value dicts
            form_name: Form to validate against
            id_fields: Field names used to identify each record in results

        Returns:
            List of per-record results, each containing:
                - record_id: Extracted identifier
                - is_valid: bool
                - errors: Field name -> message

        Example:
            results = service.batch_validate(rows, "registration", ["email"])
            failed = [r for r in results if not r["is_valid"]]
        """
        self._check_and_reload_if_stale()
        validator = self._get_validator(form_name)

        results = []
        for record in records:
            result = validator.validate_all(record)
            results.append(
                {
                    "record_id": self._extract_id(record, id_fields),
                    "is_valid": result["is_valid"],
                    "errors": result["errors"],
                }
            )
        return results

    def batch_file_validate(
        self, file_uri: str, form_name: str, id_fields: List[str]
    ) -> List[Dict[str, Any]]:
        """
        Validate records loaded from a JSON file (local or remote).

        The file may hold a list of records or a single record.

        Raises:
            RuntimeError: If the file cannot be loaded
        """
        records = self._load_records(file_uri)
        return self.batch_validate(records, form_name, id_fields)

    def discover_forms(self) -> Dict[str, Dict[str, Any]]:
        """
        Describe the configured forms.

        Returns:
            Dict mapping form name to description, field names and rule count
        """
        self._check_and_reload_if_stale()

        result = {}
        for form_name, validator in self.validators.items():
            result[form_name] = {
                "description": self.forms[form_name].get("description", ""),
                "fields": list(validator.rules),
                "rule_count": sum(len(rules) for rules in validator.rules.values()),
            }
        return result

    def describe_form(self, form_name: str) -> Dict[str, List[Dict[str, Any]]]:
        """Return the parsed rules per field, in evaluation order."""
        validator = self._get_validator(form_name)
        return {
            field: [dict(rule, params=list(rule["params"])) for rule in rules]
            for field, rules in validator.rules.items()
        }

    def discover_rules(self) -> List[str]:
        """Return the sorted names of all registered rules."""
        return sorted(self.rule_engine.get_all_rules())

    def register_rule(self, name: str, predicate: Callable) -> None:
        """
        Register a custom rule for every form.

        Raises:
            TypeError: If predicate is not callable
        """
        self.rule_engine.register(name, predicate)

    def unregister_rule(self, name: str) -> bool:
        return self.rule_engine.unregister(name)

    def reload_config(self):
        """
        Reload the config and every form schema from source.

        Registered rules are kept.
        """
        self._initialize()
        logger.info(f"Config reloaded from {self.config_loader.config_path}")

    def get_config_age(self) -> float:
        """Seconds since the config was last loaded."""
        return self.config_loader.get_config_age()

    def _extract_id(self, record, id_fields):
        """
        Build a record identifier from the given fields.

        Returns:
            Field values joined with "-", or "unknown" if none are present
        """
        id_parts = [str(record[field]) for field in id_fields if field in record]

        if not id_parts:
            return "unknown"

        return "-".join(id_parts)

    def _load_records(self, file_uri):
        parsed = urllib.parse.urlparse(file_uri)

        try:
            if parsed.scheme == "file":
                file_path = Path(urllib.parse.unquote(parsed.path)).resolve()
                if not file_path.is_file():
                    raise ValueError(f"File not found or not a regular file: {file_path}")
                data = json.loads(file_path.read_text())
            elif parsed.scheme in ("http", "https"):
                data = json.loads(self.config_loader.fetch_uri(file_uri))
            else:
                raise ValueError(f"Unsupported URI scheme: {parsed.scheme}")
        except RuntimeError:
            raise
        except Exception as e:
            raise RuntimeError(f"Failed to load records from {file_uri}: {e}") from e

        if isinstance(data, list):
            return data
        return [data]
