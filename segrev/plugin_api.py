"""Node API for segrev operators.

Node modules only need to import from this module:
    from segrev.plugin_api import node, Port, logger
"""
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional


# --- Port definition ---

@dataclass
class Port:
    """An input or output port on a node."""
    name: str
    type: str  # "ARRAY", "NUMBER", ...
    required: bool = True
    default: Any = None

    def __post_init__(self):
        if self.default is not None:
            self.required = False

    def as_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type,
                "required": self.required, "default": self.default}


# --- Node registry ---

_NODE_REGISTRY: dict = {}
_EXECUTORS: dict = {}


def _normalize_port(port: Dict[str, Any]) -> Dict[str, Any]:
    default = port.get("default")
    required = port.get("required", True) and default is None
    return {"name": port["name"], "type": port["type"], "required": required, "default": default}


def register_node(info: Dict[str, Any], executor: Optional[Callable] = None) -> Dict[str, Any]:
    """Register a node spec and, if given, its executor.

    `info` uses ports_in/ports_out lists of port dicts; they are stored as
    inputs/outputs with explicit required/default flags. Passing
    executor=None registers the spec only.
    """
    node_type = info["type"]
    if node_type in _NODE_REGISTRY:
        warnings.warn(f"Node type '{node_type}' is already registered; overriding", UserWarning)

    spec = {
        "type": node_type,
        "label": info.get("label", node_type),
        "category": info.get("category", ""),
        "description": info.get("description", ""),
        "doc": info.get("doc", ""),
        "mode": info.get("mode", "python"),
        "inputs": [_normalize_port(p) for p in info.get("ports_in", [])],
        "outputs": [
            {"name": p["name"], "type": p["type"], "required": True, "default": None}
            for p in info.get("ports_out", [])
        ],
    }
    _NODE_REGISTRY[node_type] = spec
    if executor is not None:
        _EXECUTORS[node_type] = executor
    else:
        _EXECUTORS.pop(node_type, None)
    return spec


def unregister_node(node_type: str) -> None:
    """Remove a node type from both registries. Unknown types are ignored."""
    _NODE_REGISTRY.pop(node_type, None)
    _EXECUTORS.pop(node_type, None)


def node(
    type: str,
    label: str,
    category: str,
    description: str = "",
    doc: str = "",
    ports_in: List[Port] = None,
    ports_out: List[Port] = None,
    mode: str = "python",
):
    """Decorator to register a function as a node.

    Usage:
        @node(
            type="my_node",
            label="My Node",
            category="DESTROY",
            ports_in=[Port("array", "ARRAY")],
            ports_out=[Port("array", "ARRAY")],
        )
        def my_node(params, **inputs):
            return {"array": inputs["array"][::-1]}
    """
    ports_in = ports_in or []
    ports_out = ports_out or []

    def decorator(func: Callable) -> Callable:
        spec = register_node(
            {
                "type": type,
                "label": label,
                "category": category,
                "description": description,
                "doc": doc,
                "mode": mode,
                "ports_in": [p.as_dict() for p in ports_in],
                "ports_out": [p.as_dict() for p in ports_out],
            },
            func,
        )
        func._node_spec = spec
        return func

    return decorator


def get_registry() -> dict:
    """Return a copy of the node registry."""
    return dict(_NODE_REGISTRY)


def get_executors() -> dict:
    """Return a copy of the executor functions."""
    return dict(_EXECUTORS)


# --- Logger ---

class NodeLogger:
    """Logger that tags messages with node context.

    The runner sets context before a node runs and clears it after.
    Node code just calls logger.info(), logger.debug(), etc.
    """

    def __init__(self):
        self._handler: Optional[Callable] = None
        self._node_id: Optional[str] = None
        self._node_type: Optional[str] = None

    def _set_context(self, node_id: str, node_type: str, handler: Optional[Callable]):
        self._node_id = node_id
        self._node_type = node_type
        self._handler = handler

    def _clear_context(self):
        self._node_id = None
        self._node_type = None
        self._handler = None

    def _emit(self, level: str, message: str):
        if self._handler:
            self._handler(level, self._node_id, self._node_type, message)
        else:
            print(f"[{level}] [{self._node_type}:{self._node_id}] {message}")

    def debug(self, message: str):
        self._emit("DEBUG", message)

    def info(self, message: str):
        self._emit("INFO", message)

    def warn(self, message: str):
        self._emit("WARN", message)

    def error(self, message: str):
        self._emit("ERROR", message)


# Singleton logger instance - node modules import and use this directly
logger = NodeLogger()
