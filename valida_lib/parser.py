"""
Rule Token Parser

Turns rule specifications into the flat ``{"name", "params"}`` records the
validator evaluates.

A rule specification can be written several ways:
- A plain name: ``"required"``
- A name with parameters: ``"between:18,100"``
- Several tokens in one string: ``"required|min:8"``
- A pre-built record: ``{"name": "min", "params": ["8"]}``

Parameters are kept as strings. Predicates do their own numeric coercion.
"""

from typing import Any, Dict, List


def parse_rule(rule_spec: Any) -> Dict[str, Any]:
    """
    Parse one rule token into a name/params record.

    Args:
        rule_spec: Textual token (``"name:p1,p2"``) or a structured rule

    Returns:
        Dict with ``name`` and ``params`` (list of strings)
    """
    if not isinstance(rule_spec, str):
        if isinstance(rule_spec, dict) and "name" in rule_spec:
            return {
                "name": rule_spec["name"],
                "params": [str(param) for param in rule_spec.get("params") or []],
            }
        return {"name": rule_spec, "params": []}

    # Split on the first colon only; regex and time params may contain ':'
    name, sep, raw_params = rule_spec.partition(":")
    params = raw_params.split(",") if sep and raw_params else []

    return {"name": name, "params": params}


def normalize_schema(schema: Dict[str, Any]) -> Dict[str, List[Any]]:
    """
    Normalize every field's rule specification into an ordered list.

    Lists keep their order, strings are split on ``|``, anything else
    becomes a one-element list. The input mapping is left untouched.
    """
    normalized = {}

    for field, rules in schema.items():
        if isinstance(rules, (list, tuple)):
            normalized[field] = list(rules)
        elif isinstance(rules, str):
            normalized[field] = rules.split("|")
        else:
            normalized[field] = [rules]

    return normalized


def parse_schema(schema: Dict[str, Any]) -> Dict[str, List[Dict[str, Any]]]:
    """Normalize a schema and parse each of its tokens once."""
    return {
        field: [parse_rule(rule) for rule in rules]
        for field, rules in normalize_schema(schema).items()
    }
