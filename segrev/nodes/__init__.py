"""Built-in nodes. Importing this package registers them."""
from segrev.nodes import reverse_segment  # noqa: F401
