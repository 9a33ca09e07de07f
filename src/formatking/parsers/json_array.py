"""
JSON array-of-objects detection and flattening.

Turns ``[{"a": 1}, {"a": 2, "b": 3}]`` into one table whose headers are
the union of keys in first-seen order. Values are rendered the way a
JavaScript runtime would print them, so ``true`` stays ``true``,
``1.0`` becomes ``1`` and ``1e-7`` keeps its exponent. Nested objects
and arrays are serialized compactly with the same number rendering.
"""

import json
import logging
from decimal import Decimal
from typing import Any, Dict, List

from formatking.core.models import SourceFormat, Table
from formatking.parsers.base import BaseParser
from formatking.utils.exceptions import MalformedJsonError

logger = logging.getLogger(__name__)

JSON_TABLE_NAME = "JSON Data"

# JavaScript switches to exponent notation from 1e21 upwards
JS_EXPONENT_LIMIT = 10 ** 21


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def load_json_array(text: str) -> List[Any]:
    """Parse *text* as a strict JSON array.

    ``NaN`` and ``Infinity`` literals are rejected.

    Raises:
        MalformedJsonError: If the text is not valid JSON or not an array
    """
    try:
        parsed = json.loads(text.lstrip(), parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedJsonError(str(e), position=getattr(e, "pos", None)) from e

    if not isinstance(parsed, list):
        raise MalformedJsonError("Top-level JSON value is not an array")
    return parsed


def format_js_number(value: Any) -> str:
    """Render a JSON number as JavaScript's ``String(number)`` does.

    Positional notation is used for exponents from -6 to 20, otherwise
    ``1e+21`` / ``1e-7`` style.

    Example:
        >>> [format_js_number(v) for v in (1.0, 1e21, 1e-7, 0.00001)]
        ['1', '1e+21', '1e-7', '0.00001']
    """
    if isinstance(value, int) and abs(value) < JS_EXPONENT_LIMIT:
        return str(value)
    try:
        value = float(value)
    except OverflowError:
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < JS_EXPONENT_LIMIT:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    sign = "+" if exp > 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"


def to_compact_json(value: Any) -> str:
    """Serialize a nested value like ``JSON.stringify`` without spacing."""
    if isinstance(value, dict):
        items = (f"{to_compact_json(str(k))}:{to_compact_json(v)}" for k, v in value.items())
        return "{" + ",".join(items) + "}"
    if isinstance(value, list):
        return "[" + ",".join(to_compact_json(v) for v in value) + "]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_js_number(value)
    return json.dumps(value, ensure_ascii=False)


def format_json_value(value: Any) -> str:
    """Render a JSON value as cell text."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return to_compact_json(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_js_number(value)
    return str(value)


class JsonArrayParser(BaseParser):
    """Parser for JSON arrays of flat objects.

    Example:
        >>> table = JsonArrayParser().parse('[{"a":1},{"a":2,"b":3}]')[0]
        >>> table.headers, table.data
        (['a', 'b'], [['1', ''], ['2', '3']])
    """

    source_format = SourceFormat.JSON

    def detect(self, text: str) -> bool:
        """Match a non-empty JSON array whose first element is an object."""
        if not text.lstrip().startswith("["):
            return False
        try:
            parsed = load_json_array(text)
        except MalformedJsonError as e:
            logger.debug("Not a JSON array: %s", e)
            return False
        return len(parsed) > 0 and isinstance(parsed[0], dict)

    def parse(self, text: str) -> List[Table]:
        objects: List[Dict[str, Any]] = [
            item for item in load_json_array(text) if isinstance(item, dict)
        ]

        # dict preserves insertion order, giving first-seen header order
        headers: Dict[str, None] = {}
        for obj in objects:
            headers.update(dict.fromkeys(obj))

        data = [[format_json_value(obj.get(h)) for h in headers] for obj in objects]

        logger.info("Parsed JSON array: %d rows, %d columns", len(data), len(headers))
        return [Table(name=JSON_TABLE_NAME, headers=list(headers), data=data)]
