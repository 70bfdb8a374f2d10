from __future__ import annotations

from typing import Any

from dim_explorer.core.model import DimensionKind
from dim_explorer.validation.errors import ValidationIssue, ValidationError


def validate_data_document(obj: Any) -> None:
    """
    Validate the raw JSON document BEFORE building nodes and dimensions.
    This prevents half-valid loads from poisoning app state.

    Missing or malformed per-node attribute maps are not issues: they default
    to an empty mapping during loading.
    """
    if not isinstance(obj, dict):
        raise ValidationError([ValidationIssue("DATA_TYPE", "Data document must be a JSON object.")])

    issues: list[ValidationIssue] = []

    dims = obj.get("dimensions")
    if dims is None:
        dims = []
    nodes = obj.get("nodes")
    if nodes is None:
        nodes = []

    if not isinstance(dims, list):
        issues.append(ValidationIssue("DIMENSIONS_TYPE", "dimensions must be a list."))
        dims = []
    if not isinstance(nodes, list):
        issues.append(ValidationIssue("NODES_TYPE", "nodes must be a list."))
        nodes = []

    seen_dims: set[str] = set()
    for i, d in enumerate(dims):
        if not isinstance(d, dict):
            issues.append(ValidationIssue("DIM_TYPE", f"dimensions[{i}] must be an object."))
            continue
        dim_id = d.get("id")
        if dim_id is None or str(dim_id).strip() == "":
            issues.append(ValidationIssue("DIM_ID", f"dimensions[{i}].id missing."))
        elif str(dim_id) in seen_dims:
            issues.append(ValidationIssue("DIM_ID_DUPLICATE", f"dimensions[{i}].id '{dim_id}' is duplicated."))
        else:
            seen_dims.add(str(dim_id))
        if DimensionKind.parse(d.get("kind")) is None:
            issues.append(
                ValidationIssue(
                    "DIM_KIND",
                    f"dimensions[{i}].kind {d.get('kind')!r} is not one of numeric, datetime, categorical.",
                )
            )

    seen_nodes: set[str] = set()
    for i, n in enumerate(nodes):
        if not isinstance(n, dict):
            issues.append(ValidationIssue("NODE_TYPE", f"nodes[{i}] must be an object."))
            continue
        node_id = n.get("id")
        if node_id is None or str(node_id).strip() == "":
            issues.append(ValidationIssue("NODE_ID", f"nodes[{i}].id missing."))
        elif str(node_id) in seen_nodes:
            issues.append(ValidationIssue("NODE_ID_DUPLICATE", f"nodes[{i}].id '{node_id}' is duplicated."))
        else:
            seen_nodes.add(str(node_id))

    if issues:
        raise ValidationError(issues)
