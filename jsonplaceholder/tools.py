# tools.py
import os
import logging
from typing import Dict

import yaml # Import yaml

logger = logging.getLogger(__name__)

# Get the directory of the current file
current_dir = os.path.dirname(__file__)
# Construct the path to the OpenAPI spec file
OPENAPI_SPEC_FILE = os.path.join(current_dir, "jsonplaceholder_spec.yaml")


def load_openapi_spec(path: str = OPENAPI_SPEC_FILE) -> Dict:
    """Loads the OpenAPI description of the JSONPlaceholder endpoints."""
    # Use yaml.safe_load for .yaml files
    with open(path, 'r') as f:
        return yaml.safe_load(f)


def build_endpoint_table(spec: Dict) -> Dict[str, str]:
    """
    Maps each GET operationId to its path template, e.g. 'getPost' -> '/posts/{id}'.
    Only read operations are exposed; this client never writes.
    """
    endpoints = {}
    for path, operations in spec.get("paths", {}).items():
        operation = (operations or {}).get("get")
        if not operation:
            continue
        operation_id = operation.get("operationId")
        if not operation_id:
            raise ValueError(f"GET {path} has no operationId in the OpenAPI spec")
        endpoints[operation_id] = path
    return endpoints


def default_server_url(spec: Dict) -> str:
    servers = spec.get("servers") or []
    if not servers:
        raise ValueError("OpenAPI spec declares no servers")
    return servers[0]["url"].rstrip("/")


# Load the OpenAPI specification from the file
jsonplaceholder_spec = load_openapi_spec()

# --- JSONPlaceholder endpoint table ---
# operationId -> path template, consumed by JsonPlaceholderClient
JSONPLACEHOLDER_ENDPOINTS = build_endpoint_table(jsonplaceholder_spec)
JSONPLACEHOLDER_SERVER_URL = default_server_url(jsonplaceholder_spec)
