"""Configuration loading: validator options, message overrides and form schemas."""

import json
import os
import time
import urllib.parse
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
import requests
import yaml

# Validator options accepted by Validator() and the config "options" key
OPTIONS_SCHEMA = {
    "type": "object",
    "properties": {
        "realtime": {"type": "boolean"},
        "validate_on_blur": {"type": "boolean"},
        "validate_on_input": {"type": "boolean"},
        "validate_on_submit": {"type": "boolean"},
        "messages": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
    "additionalProperties": False,
}

_RULE_RECORD_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "params": {"type": "array", "items": {"type": ["string", "number"]}},
    },
    "required": ["name"],
}

# A single form schema document (YAML or JSON)
FORM_DOCUMENT_SCHEMA = {
    "type": "object",
    "properties": {
        "description": {"type": "string"},
        "fields": {
            "type": "object",
            "additionalProperties": {
                "anyOf": [
                    {"type": "string"},
                    _RULE_RECORD_SCHEMA,
                    {
                        "type": "array",
                        "items": {"anyOf": [{"type": "string"}, _RULE_RECORD_SCHEMA]},
                    },
                ]
            },
        },
        "messages": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
    "required": ["fields"],
}

# The top-level config file
CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "options": {"type": "object"},
        "messages": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "forms": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "config_max_age_seconds": {"type": ["number", "null"], "minimum": 0},
    },
}


def check_options(options: Dict[str, Any]) -> None:
    """
    Check validator options against OPTIONS_SCHEMA.

    Raises:
        ValueError: If an option is unknown or has the wrong type
    """
    try:
        jsonschema.validate(instance=options, schema=OPTIONS_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ValueError(f"Invalid validator options: {e.message}") from e


class ConfigLoader:
    """Loads the config file and the form schema documents it points to."""

    DEFAULT_CONFIG = "local-config.yaml"
    FETCH_TIMEOUT = 10

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to a config file. Defaults to the bundled
                local-config.yaml.

        Raises:
            ValueError: If the config file is not valid
        """
        if config_path:
            self.config_path = str(Path(config_path).resolve())
            with open(self.config_path) as f:
                self.config = yaml.safe_load(f) or {}
        else:
            config_file = files("valida_lib").joinpath(self.DEFAULT_CONFIG)
            self.config_path = str(config_file)
            with config_file.open("r") as f:
                self.config = yaml.safe_load(f) or {}

        try:
            jsonschema.validate(instance=self.config, schema=CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ValueError(f"Invalid config {self.config_path}: {e.message}") from e

        check_options(dict(self.config.get("options") or {}))
        self.loaded_at = time.time()

    def get_options(self) -> Dict[str, Any]:
        """Validator options from the config (without messages)."""
        options = dict(self.config.get("options") or {})
        options.pop("messages", None)
        return options

    def get_messages(self) -> Dict[str, str]:
        """
        Global message overrides shared by every form.

        Top-level ``messages`` win over ``options.messages``.
        """
        options = self.config.get("options") or {}
        return {**(options.get("messages") or {}), **(self.config.get("messages") or {})}

    def get_form_uris(self) -> Dict[str, str]:
        """Form name -> schema document URI."""
        return dict(self.config.get("forms") or {})

    def get_max_age(self) -> Optional[float]:
        """Seconds before the config is considered stale, or None to never reload."""
        return self.config.get("config_max_age_seconds")

    def get_config_age(self) -> float:
        """Seconds since the config was loaded."""
        return time.time() - self.loaded_at

    def load_form(self, form_name: str) -> Dict[str, Any]:
        """
        Load and check the schema document for a configured form.

        Raises:
            ValueError: If the form is not configured or its document is invalid
        """
        uris = self.get_form_uris()
        if form_name not in uris:
            raise ValueError(f"Unknown form: {form_name}")

        uri = uris[form_name]
        document = self.load_document(uri)

        try:
            jsonschema.validate(instance=document, schema=FORM_DOCUMENT_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ValueError(f"Invalid form schema {uri}: {e.message}") from e

        return document

    def load_document(self, uri: str) -> Any:
        """
        Load a YAML or JSON document from a URI.

        Supports:
        - Relative paths - resolved against the config file's directory
        - file:// - Local filesystem (absolute paths)
        - http:// and https:// - Remote, fetched with requests

        Raises:
            ValueError: If the scheme is unsupported
            RuntimeError: If a remote fetch fails
        """
        parsed = urllib.parse.urlparse(uri)

        if not parsed.scheme:
            config_dir = os.path.dirname(os.path.abspath(self.config_path))
            return self._parse(Path(config_dir, uri).read_text(), uri)

        if parsed.scheme == "file":
            path = urllib.parse.unquote(parsed.path)
            return self._parse(Path(path).read_text(), uri)

        if parsed.scheme in ("http", "https"):
            return self._parse(self.fetch_uri(uri), uri)

        raise ValueError(f"Unsupported URI scheme: {parsed.scheme} in {uri}")

    def _parse(self, content: str, uri: str) -> Any:
        # .json documents go through json, everything else through yaml
        if uri.endswith(".json"):
            return json.loads(content)
        return yaml.safe_load(content)

    def fetch_uri(self, uri: str) -> str:
        """Fetch content from HTTP/HTTPS URI."""
        try:
            response = requests.get(uri, timeout=self.FETCH_TIMEOUT)
            response.raise_for_status()
            return response.text
        except requests.RequestException as e:
            raise RuntimeError(f"Failed to fetch {uri}: {e}") from e
