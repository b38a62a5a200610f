"""
Graph naming for namescope.

Names the nodes of torch.fx graphs for kernel code generation.
"""

from .fx_naming import FxGraphNamer, GraphNaming, target_name

__all__ = [
    "FxGraphNamer",
    "GraphNaming",
    "target_name",
]
