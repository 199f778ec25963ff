from typing import Any, Optional, Dict
import decimal


def json_safe(obj):
    if isinstance(obj, dict):
        return {k: json_safe(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [json_safe(v) for v in obj]
    elif isinstance(obj, decimal.Decimal):
        # keep whole numbers as ints so quantities and counts stay integral
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    else:
        return obj


def standard_response(
    success: bool,
    data: Any = None,
    error: Optional[str] = None,
    message: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    response = {
        "success": success,
        "data": json_safe(data),
        "error": error
    }
    if message is not None:
        response["message"] = message
    for key, value in extra.items():
        response[key] = json_safe(value)
    return response
