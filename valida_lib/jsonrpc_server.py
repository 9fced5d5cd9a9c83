#!/usr/bin/env python3
"""
JSON-RPC 2.0 Server for ValidationService

Provides a JSON-RPC interface to valida-lib, so form front ends written in
any language can validate through a child process over stdin/stdout.

Protocol: JSON-RPC 2.0 over stdin/stdout (newline-delimited JSON)
Specification: https://www.jsonrpc.org/specification

Usage:
    python -m valida_lib.jsonrpc_server [--debug] [--config PATH]

Example request (stdin):
    {"jsonrpc":"2.0","id":1,"method":"validate","params":{"form":"login","values":{"email":"a@b.co"}}}

Example response (stdout):
    {"jsonrpc":"2.0","id":1,"result":{"is_valid":false,"errors":{"password":"The Password field is required."}}}
"""

import argparse
import json
import signal
import sys
import traceback
from typing import Any, Dict, Optional

from valida_lib import ValidationService


class InvalidParams(ValueError):
    """A request is missing a required parameter."""


class ValidationJsonRpcServer:
    """JSON-RPC 2.0 server wrapping ValidationService API."""

    # JSON-RPC error codes
    ERROR_PARSE = -32700  # Invalid JSON
    ERROR_INVALID_REQUEST = -32600  # Invalid JSON-RPC structure
    ERROR_METHOD_NOT_FOUND = -32601  # Unknown method
    ERROR_INVALID_PARAMS = -32602  # Invalid parameters
    ERROR_INTERNAL = -32000  # Application error (catch-all)

    def __init__(self, debug: bool = False, config_path: Optional[str] = None):
        """
        Initialize JSON-RPC server.

        Args:
            debug: Enable debug logging to stderr
            config_path: Config file for the ValidationService
        """
        self.service = ValidationService(config_path)
        self.running = False
        self.debug = debug

        # Method dispatch table
        self.methods = {
            "validate": self._handle_validate,
            "validate_field": self._handle_validate_field,
            "batch_validate": self._handle_batch_validate,
            "batch_file_validate": self._handle_batch_file_validate,
            "discover_forms": self._handle_discover_forms,
            "describe_form": self._handle_describe_form,
            "discover_rules": self._handle_discover_rules,
            "reload_config": self._handle_reload_config,
            "get_config_age": self._handle_get_config_age,
        }

    def _log(self, message: str):
        """Log debug message to stderr (doesn't interfere with JSON-RPC on stdout)."""
        if self.debug:
            sys.stderr.write(f"[DEBUG] {message}\n")
            sys.stderr.flush()

    def start_server(self):
        """
        Start the JSON-RPC server loop.

        Reads requests from stdin, processes them, writes responses to stdout.
        Runs until EOF or stop signal received.
        """
        self.running = True
        self._log("ValidationService JSON-RPC server started")

        while self.running:
            try:
                line = sys.stdin.readline()

                if not line:
                    self._log("EOF received, shutting down")
                    break

                if not line.strip():
                    continue

                self._log(f"Received: {line.strip()}")
                self._send_response(self.handle_request(line))

            except KeyboardInterrupt:
                self._log("KeyboardInterrupt received, shutting down")
                break

            except Exception as e:
                self._log(f"Fatal error in main loop: {e}")
                traceback.print_exc(file=sys.stderr)
                break

        self._log("Server stopped")

    def stop_server(self):
        """Stop the server gracefully; the main loop exits after the current request."""
        self.running = False
        self._log("Stop signal received")

    def handle_request(self, request_json: str) -> Dict[str, Any]:
        """
        Parse and process a JSON-RPC request.

        Args:
            request_json: JSON-RPC request string

        Returns:
            JSON-RPC response dict (success or error)
        """
        request_id = None

        try:
            try:
                request = json.loads(request_json)
            except json.JSONDecodeError as e:
                return self._error_response(None, self.ERROR_PARSE, f"Parse error: {e}")

            if not isinstance(request, dict):
                return self._error_response(
                    None, self.ERROR_INVALID_REQUEST, "Request must be a JSON object"
                )

            if request.get("jsonrpc") != "2.0":
                return self._error_response(
                    None,
                    self.ERROR_INVALID_REQUEST,
                    f"Invalid JSON-RPC version: {request.get('jsonrpc')}",
                )

            request_id = request.get("id")
            method = request.get("method")
            params = request.get("params", {})

            if not method:
                return self._error_response(
                    request_id, self.ERROR_INVALID_REQUEST, "Missing 'method' field"
                )

            if method not in self.methods:
                return self._error_response(
                    request_id, self.ERROR_METHOD_NOT_FOUND, f"Method not found: {method}"
                )

            if not isinstance(params, dict):
                return self._error_response(
                    request_id,
                    self.ERROR_INVALID_PARAMS,
                    f"Params must be an object, got {type(params).__name__}",
                )

            self._log(f"Dispatching method: {method}")
            try:
                result = self.methods[method](params)
            except InvalidParams as e:
                return self._error_response(request_id, self.ERROR_INVALID_PARAMS, str(e))

            return self._success_response(request_id, result)

        except Exception as e:
            self._log(f"Error processing request: {e}")
            return self._error_response(request_id, self.ERROR_INTERNAL, f"Internal error: {e}")

    # Method handlers - wrap ValidationService API

    def _require(self, params: Dict[str, Any], *names: str):
        """Return the named params in order."""
        for name in names:
            if params.get(name) is None:
                raise InvalidParams(f"Missing required parameter: {name}")
        return [params[name] for name in names]

    def _handle_validate(self, params: Dict[str, Any]) -> Any:
        form, values = self._require(params, "form", "values")
        return self.service.validate(form, values)

    def _handle_validate_field(self, params: Dict[str, Any]) -> Any:
        form, field = self._require(params, "form", "field")
        error = self.service.validate_field(
            form, field, params.get("value"), params.get("values")
        )
        return {"field": field, "error": error}

    def _handle_batch_validate(self, params: Dict[str, Any]) -> Any:
        records, form, id_fields = self._require(params, "records", "form", "id_fields")
        return self.service.batch_validate(records, form, id_fields)

    def _handle_batch_file_validate(self, params: Dict[str, Any]) -> Any:
        file_uri, form, id_fields = self._require(params, "file_uri", "form", "id_fields")
        return self.service.batch_file_validate(file_uri, form, id_fields)

    def _handle_discover_forms(self, params: Dict[str, Any]) -> Any:
        return self.service.discover_forms()

    def _handle_describe_form(self, params: Dict[str, Any]) -> Any:
        (form,) = self._require(params, "form")
        return self.service.describe_form(form)

    def _handle_discover_rules(self, params: Dict[str, Any]) -> Any:
        return self.service.discover_rules()

    def _handle_reload_config(self, params: Dict[str, Any]) -> Any:
        self.service.reload_config()
        return {"status": "ok", "message": "Config reloaded successfully"}

    def _handle_get_config_age(self, params: Dict[str, Any]) -> Any:
        return {"config_age": self.service.get_config_age()}

    # Response formatting

    def _success_response(self, request_id: Any, result: Any) -> Dict[str, Any]:
        return {"jsonrpc": "2.0", "id": request_id, "result": result}

    def _error_response(
        self, request_id: Any, code: int, message: str, data: Optional[Any] = None
    ) -> Dict[str, Any]:
        error = {"code": code, "message": message}
        if data is not None:
            error["data"] = data

        return {"jsonrpc": "2.0", "id": request_id, "error": error}

    def _send_response(self, response: Dict[str, Any]):
        """Send JSON-RPC response to stdout."""
        response_json = json.dumps(response)
        self._log(f"Sending: {response_json}")
        sys.stdout.write(response_json + "\n")
        sys.stdout.flush()


def main():
    """Main entry point for JSON-RPC server."""
    parser = argparse.ArgumentParser(
        description="valida-lib JSON-RPC 2.0 Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example usage:
  python -m valida_lib.jsonrpc_server
  python -m valida_lib.jsonrpc_server --debug --config ./my-config.yaml

Supported methods:
  - validate
  - validate_field
  - batch_validate
  - batch_file_validate
  - discover_forms
  - describe_form
  - discover_rules
  - reload_config
  - get_config_age

Protocol: JSON-RPC 2.0 over stdin/stdout
See: https://www.jsonrpc.org/specification
        """,
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging to stderr")
    parser.add_argument("--config", default=None, help="Path to a config file")

    args = parser.parse_args()

    server = ValidationJsonRpcServer(debug=args.debug, config_path=args.config)

    def signal_handler(sig, frame):
        server.stop_server()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    server.start_server()


if __name__ == "__main__":
    main()
