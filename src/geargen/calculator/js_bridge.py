"""
JavaScript-Python bridge for Pyodide.

Provides a single entry point for all JS->Python calculator calls.
All inputs are validated via Pydantic models before processing, and the
function never raises: every failure is reported in the output payload.

Usage from JavaScript:
    pyodide.globals.set('input_json', JSON.stringify({
        type: 'helical', module: 2, teeth: 20, helixAngle: 15
    }));
    const result = await pyodide.runPythonAsync(`
        from geargen.calculator.js_bridge import calculate
        calculate(input_json)
    `);
    const output = JSON.parse(result);
"""

import json
import logging
from typing import Any, Dict, List, Optional, TypedDict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import GearGeometryError
from .gear_types import generate, parse_gear_params
from .output import export_filename, to_json, to_markdown, to_summary
from .validation import validate_design

logger = logging.getLogger(__name__)


class ValidationMessageDict(TypedDict, total=False):
    """Type for validation message dictionaries sent to JavaScript."""
    severity: str  # "error", "warning", "info"
    code: str  # e.g., "TEETH_UNDERCUT_RISK"
    message: str
    suggestion: Optional[str]


# ============================================================================
# Input Models
# ============================================================================

_OPTION_KEYS = ("include_points", "includePoints")


class CalculatorInputs(BaseModel):
    """
    All inputs from the gear designer UI.

    The UI sends a flat object: gear parameters (any spelling accepted by
    parse_params) plus output options. The parameters are collected into
    ``params`` and parsed into a typed record later, so parameter errors
    come back as typed gear errors.
    """
    model_config = ConfigDict(extra='ignore')

    include_points: bool = True
    params: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def collect_params(cls, data):
        if not isinstance(data, dict) or 'params' in data:
            return data
        include_points = data.get('include_points', data.get('includePoints', True))
        params = {k: v for k, v in data.items() if k not in _OPTION_KEYS}
        return {'include_points': include_points, 'params': params}


# ============================================================================
# Output Models
# ============================================================================

class CalculatorOutput(BaseModel):
    """Output from calculate() - matches what JS expects."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None
    error_type: Optional[str] = None  # exception class name
    error_code: Optional[str] = None  # GearGeometryError.code

    # Design data (JSON string for JS to parse)
    design_json: Optional[str] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None

    # Validation
    valid: bool = True
    # Plain dicts: pydantic only accepts typing.TypedDict fields on Python 3.12+
    messages: List[Dict[str, Optional[str]]] = Field(default_factory=list)

    # Suggested download name for the extruded model
    filename: Optional[str] = None


def message_dict(message) -> ValidationMessageDict:
    """Flatten a ValidationMessage for the JS side."""
    return {
        'severity': message.severity.value,
        'message': message.message,
        'code': message.code,
        'suggestion': message.suggestion,
    }


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all calculator operations from JavaScript.

    Args:
        input_json: JSON string with gear parameters and output options

    Returns:
        JSON string with CalculatorOutput structure
    """
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)

        # Blank form fields fall back to record defaults
        raw = {k: v for k, v in sanitize_dict(inputs.params).items() if v is not None}
        params = parse_gear_params(raw)

        result = generate(params)
        validation = validate_design(result)

        output = CalculatorOutput(
            success=True,
            design_json=to_json(result, include_points=inputs.include_points),
            summary=to_summary(result),
            markdown=to_markdown(result, validation),
            valid=validation.valid,
            messages=[message_dict(m) for m in validation.messages],
            filename=export_filename(params),
        )

        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}",
            error_type=type(e).__name__
        ).model_dump_json()

    except GearGeometryError as e:
        logger.debug(f"Rejected gear parameters: {e.code}: {e}")
        return CalculatorOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
            error_code=e.code
        ).model_dump_json()

    except Exception as e:
        logger.debug(f"Calculation failed: {type(e).__name__}: {e}")
        return CalculatorOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__
        ).model_dump_json()


# ============================================================================
# Sanitization of values crossing the Pyodide boundary
# ============================================================================

def sanitize_js_value(value: Any) -> Any:
    """Convert JavaScript value to Python, handling Pyodide edge cases."""
    if value is None:
        return None

    class_name = str(value.__class__)
    if 'JsNull' in class_name or 'JsUndefined' in class_name:
        return None

    if isinstance(value, str) and value == '':
        return None

    return value


def sanitize_dict(js_dict: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Recursively sanitize a dictionary from JavaScript."""
    if js_dict is None:
        return {}

    result: Dict[str, Any] = {}
    for key, value in js_dict.items():
        if isinstance(value, dict):
            result[key] = sanitize_dict(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_dict(v) if isinstance(v, dict) else sanitize_js_value(v)
                for v in value
            ]
        else:
            result[key] = sanitize_js_value(value)

    return result
