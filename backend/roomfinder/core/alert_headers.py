"""Alert Headers: response headers announcing entity mutations and failures.

Invariants:
    - Success: X-{app}-alert = "{app}.{entity}.{action}", X-{app}-params = entity id
    - Failure: X-{app}-error = "error.{key}", X-{app}-params = entity name
"""

from roomfinder.core.domain_types import AlertAction


def entity_alert(
    app_name: str, entity_name: str, action: AlertAction, param: str,
) -> dict[str, str]:
    return {
        f"X-{app_name}-alert": f"{app_name}.{entity_name}.{action.value}",
        f"X-{app_name}-params": param,
    }


def failure_alert(app_name: str, entity_name: str, error_key: str) -> dict[str, str]:
    return {
        f"X-{app_name}-error": f"error.{error_key}",
        f"X-{app_name}-params": entity_name,
    }
