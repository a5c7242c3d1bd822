"""Runs a single registered node with logger context."""
from typing import Any, Callable, Dict, Optional

from segrev.models import NodeUnavailableError
from segrev.plugin_api import _NODE_REGISTRY, _EXECUTORS, logger as node_logger


def run_node(
    node_type: str,
    params: Optional[Dict[str, Any]] = None,
    node_id: Optional[str] = None,
    log_handler: Optional[Callable] = None,
    **inputs,
) -> Dict[str, Any]:
    """Execute `node_type` with params and inputs. Returns the node's output dict.

    log_handler, if given, receives (level, node_id, node_type, message) for
    every message the node logs.
    """
    node_id = node_id or node_type
    if node_type not in _NODE_REGISTRY:
        raise NodeUnavailableError(node_id, node_type, "not registered")
    executor = _EXECUTORS.get(node_type)
    if executor is None:
        raise NodeUnavailableError(node_id, node_type, "spec-only (no executor)")

    node_logger._set_context(node_id, node_type, log_handler)
    try:
        return executor(params or {}, **inputs)
    finally:
        node_logger._clear_context()
