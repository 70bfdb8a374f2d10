from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from dim_explorer.config.model import GlobalConfig, LoadedData, PlotConfig
from dim_explorer.core.exceptions import ConfigError, DataLoadError
from dim_explorer.core.model import Dimension, DimensionKind, Node
from dim_explorer.validation.data_validation import validate_data_document

logger = logging.getLogger(__name__)

DATA_FILE_ENV = "DIM_EXPLORER_DATA_FILE"


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json
            data.json      (or whatever global.json's "data_file" names)

    global.json keys:

    - ui_title: title for UI, defaults to 'Dimension Explorer'
    - subtitle: navbar subtitle
    - data_file: path of the node/dimension document, relative paths are
                 resolved against the config root. DIM_EXPLORER_DATA_FILE
                 overrides it.
    - plot: {"width", "height", "pad"} for the 2D canvas

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a valid JSON object.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    # Resolve data_file:
    # - Absolute paths are used as-is.
    # - Relative paths are resolved relative to the config root directory.
    data_file_raw = os.environ.get(DATA_FILE_ENV) or raw_global.get("data_file", "data.json")
    data_file = Path(data_file_raw)
    if not data_file.is_absolute():
        data_file = (root / data_file).resolve()

    try:
        plot = PlotConfig.from_raw(raw_global.get("plot"))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid 'plot' section in {global_path}: {e}") from e

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Dimension Explorer"),
        subtitle=raw_global.get("subtitle", "Explore nodes along one or two dimensions"),
        data_file=data_file,
        plot=plot,
    )


def _build_dimension(raw: Dict[str, Any]) -> Dimension:
    dim_id = str(raw["id"])
    return Dimension(
        id=dim_id,
        name=str(raw.get("name") or dim_id),
        kind=DimensionKind.parse(raw.get("kind")),
    )


def _build_node(raw: Dict[str, Any]) -> Node:
    node_id = str(raw["id"])
    attributes = raw.get("dimensions")
    if not isinstance(attributes, dict):
        # No attributes: every dimension is missing for this node
        attributes = {}
    return Node(
        id=node_id,
        label=str(raw.get("label") or node_id),
        attributes={str(k): v for k, v in attributes.items()},
    )


def load_data(raw: Any) -> LoadedData:
    """
    Build the node and dimension catalogs from an already-parsed document.

    :raises ValidationError: listing every structural issue found
    """
    validate_data_document(raw)

    dimensions: List[Dimension] = [_build_dimension(d) for d in raw.get("dimensions") or []]
    nodes: List[Node] = [_build_node(n) for n in raw.get("nodes") or []]

    return LoadedData(nodes=nodes, dimensions=dimensions)


def load_data_file(path: Path) -> LoadedData:
    """
    Read and parse the data document from disk.

    Main entrypoint used by the UI.

    :raises DataLoadError: if the file is missing or not valid JSON
    :raises ValidationError: if the document structure is invalid
    """
    path = Path(path)
    if not path.is_file():
        raise DataLoadError(f"Data file not found at {path}")

    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Failed to load data from {path}: {e}") from e

    data = load_data(raw)

    logger.info(
        "Data loaded",
        extra={
            "data_file": str(path),
            "n_nodes": len(data.nodes),
            "n_dimensions": len(data.dimensions),
            "dimension_ids": [d.id for d in data.dimensions],
        },
    )
    return data
