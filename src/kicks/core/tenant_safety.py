"""Guard against generating a workspace that points at a real tenant.

The tenant endpoint in a copied ``tenant.yml`` must contain the safety marker
before any step that mutates tenant data is allowed to run.
"""

from pathlib import Path
from typing import Any

import yaml

from kicks.core.errors import SafetyValidationError

TENANT_CONFIG_FILENAME = "tenant.yml"
TENANT_URL_KEYS = ("tenant", "url")
SAFETY_MARKER = "kickme"

REMEDIATION = (
    f"Only tenants whose URL contains '{SAFETY_MARKER}' may be used for generated workspaces.\n"
    f"Point tenant.url at a sandbox tenant in your project's {TENANT_CONFIG_FILENAME} "
    "and run kicks again."
)


def validate_tenant_safety(workspace: Path) -> str:
    """Check the workspace's tenant URL carries the safety marker.

    Args:
        workspace: Workspace directory with config files already copied in

    Returns:
        The validated tenant URL

    Raises:
        SafetyValidationError: If the file, the URL field or the marker is missing
    """
    tenant_config = workspace / "config" / TENANT_CONFIG_FILENAME
    if not tenant_config.exists():
        raise SafetyValidationError(f"{tenant_config} not found\n{REMEDIATION}")

    try:
        data = yaml.safe_load(tenant_config.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SafetyValidationError(f"Cannot parse {tenant_config}: {e}\n{REMEDIATION}") from e

    url = _nested_value(data, TENANT_URL_KEYS)
    field_name = ".".join(TENANT_URL_KEYS)
    if not isinstance(url, str):
        raise SafetyValidationError(f"No {field_name} in {tenant_config}\n{REMEDIATION}")

    if SAFETY_MARKER not in url:
        raise SafetyValidationError(
            f"{field_name} '{url}' in {tenant_config} is not a sandbox tenant\n{REMEDIATION}"
        )

    return url


def _nested_value(data: Any, keys: tuple[str, ...]) -> Any:
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
