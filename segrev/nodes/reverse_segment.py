"""Node: Reverse Segment."""
from segrev.models import Segment
from segrev.plugin_api import node, Port, logger
from segrev.reverse import reverse_in_place


def _resolve(name, params, inputs, default):
    if params.get(name) is not None:
        return params[name]
    if inputs.get(name) is not None:
        return inputs[name]
    return default


@node(
    type="reverse_segment",
    label="Reverse Segment",
    category="DESTROY",
    description="Reverse the elements between two indices",
    doc="Reverses array[start..end] (both inclusive) with a two-pointer swap. End defaults to the last index. Bounds outside the array raise InvalidRangeError.",
    ports_in=[
        Port("array", "ARRAY"),
        Port("start", "NUMBER", default=0),
        Port("end", "NUMBER", required=False),
    ],
    ports_out=[Port("array", "ARRAY")],
)
def reverse_segment(params, **inputs):
    arr = inputs["array"].copy()
    seg = Segment(
        start=_resolve("start", params, inputs, 0),
        end=_resolve("end", params, inputs, len(arr) - 1),
    )
    reverse_in_place(arr, seg.start, seg.end)
    logger.debug(f"Reversed segment [{seg.start}:{seg.end}] ({seg.swap_count} swaps)")
    return {"array": arr}
