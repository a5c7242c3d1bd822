"""Tests for the reverse_segment node."""
import sys
import os

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import segrev.nodes  # noqa: F401  (registers built-in nodes)
from segrev.executor import run_node
from segrev.models import InvalidRangeError
from segrev.plugin_api import _NODE_REGISTRY
from segrev.nodes.reverse_segment import reverse_segment


def test_node_spec():
    spec = reverse_segment._node_spec
    assert spec["category"] == "DESTROY"
    names = [p["name"] for p in spec["inputs"]]
    assert names == ["array", "start", "end"]
    assert spec["inputs"][0]["required"] is True
    assert spec["inputs"][1]["default"] == 0
    assert spec["inputs"][2]["required"] is False


def test_reverses_given_segment():
    arr = np.array([1, 2, 3, 4, 5])
    result = run_node("reverse_segment", {"start": 1, "end": 3}, array=arr)
    assert result["array"].tolist() == [1, 4, 3, 2, 5]


def test_does_not_mutate_input():
    arr = np.array([1, 2, 3, 4, 5])
    run_node("reverse_segment", {"start": 0, "end": 4}, array=arr)
    assert arr.tolist() == [1, 2, 3, 4, 5]


def test_defaults_reverse_whole_array():
    result = run_node("reverse_segment", array=np.arange(5))
    assert result["array"].tolist() == [4, 3, 2, 1, 0]


def test_bounds_from_inputs_and_number_floats():
    result = run_node("reverse_segment", array=np.arange(6), start=2.0, end=4.0)
    assert result["array"].tolist() == [0, 1, 4, 3, 2, 5]


def test_params_override_inputs():
    result = run_node("reverse_segment", {"start": 0, "end": 1}, array=np.arange(4), start=2, end=3)
    assert result["array"].tolist() == [1, 0, 2, 3]


def test_works_on_plain_list():
    result = run_node("reverse_segment", {"start": 0, "end": 1}, array=[7, 8])
    assert result["array"] == [8, 7]


def test_logs_swap_count():
    entries = []
    run_node("reverse_segment", {"start": 0, "end": 4}, log_handler=lambda *a: entries.append(a),
             array=np.arange(5))
    assert entries[0][0] == "DEBUG"
    assert "2 swaps" in entries[0][3]


def test_invalid_bounds_raise():
    with pytest.raises(InvalidRangeError):
        run_node("reverse_segment", {"start": 2, "end": 10}, array=np.arange(5))


def test_registered_under_type():
    assert "reverse_segment" in _NODE_REGISTRY
