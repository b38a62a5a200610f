"""
FX Graph Naming for Kernel Generation.

Assigns target-language identifiers to the nodes of a torch.fx graph
before kernel source is emitted. Each annotated graph becomes one kernel:
its function name is reserved module-wide, while parameters and
intermediate values live in the kernel's own scope.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import torch.fx

from ..profiles import LanguageProfile
from ..scope import Scope
from ..utils.constants import DEFAULT_FX_PROFILE, DEFAULT_KERNEL_NAME
from ..utils.logging import get_logger

logger = get_logger(__name__)

VALUE_OPS = ("call_function", "call_method", "call_module", "get_attr")


@dataclass
class GraphNaming:
    """Identifiers chosen for one FX graph."""

    function_name: str
    parameters: Dict[str, str] = field(default_factory=dict)  # FX node name -> identifier
    values: Dict[str, str] = field(default_factory=dict)  # FX node name -> identifier
    execution_order: List[str] = field(default_factory=list)  # FX node names, graph order

    def name_of(self, node: Union[torch.fx.Node, str]) -> str:
        """Identifier chosen for a node (or FX node name)."""
        key = node.name if isinstance(node, torch.fx.Node) else node
        if key in self.parameters:
            return self.parameters[key]
        return self.values[key]


def target_name(node: torch.fx.Node) -> str:
    """Readable base name for what a node computes."""
    target = node.target
    if node.op == "call_function":
        name = getattr(target, "__name__", None) or str(target)
        # aten overloads are named like "add.Tensor"
        return name.split(".")[0]
    if node.op in ("call_module", "get_attr"):
        return str(target).split(".")[-1]
    return str(target)


class FxGraphNamer:
    """
    Names FX graph nodes with a scope tree.

    One namer owns the module scope, so kernels annotated by the same
    namer never share a function name.
    """

    def __init__(
        self,
        scope: Optional[Scope] = None,
        profile: Union[LanguageProfile, str] = DEFAULT_FX_PROFILE,
        kernel_name: str = DEFAULT_KERNEL_NAME,
    ):
        """
        Initialize the namer.

        Args:
            scope: Module-level scope; a new root scope is created if None
            profile: Language profile for a newly created root scope
            kernel_name: Base name for generated kernel functions
        """
        self.module_scope = scope if scope is not None else Scope(profile=profile)
        self.kernel_name = kernel_name

    def annotate(self, graph: Union[torch.fx.GraphModule, torch.fx.Graph]) -> GraphNaming:
        """
        Choose identifiers for every node of graph.

        Args:
            graph: FX graph or graph module to name

        Returns:
            GraphNaming with the kernel name, parameter and value names
        """
        if isinstance(graph, torch.fx.GraphModule):
            graph = graph.graph

        kernel_scope = self.module_scope.derive()
        naming = GraphNaming(function_name=kernel_scope.claim_global(self.kernel_name))

        for node in graph.nodes:
            if node.op == "placeholder":
                naming.parameters[node.name] = kernel_scope.claim(node.name)
            elif node.op in VALUE_OPS:
                naming.values[node.name] = kernel_scope.claim(kernel_scope.suggest(target_name(node)))
            else:
                continue
            naming.execution_order.append(node.name)

        logger.debug(
            f"Named kernel '{naming.function_name}': "
            f"{len(naming.parameters)} parameters, {len(naming.values)} values"
        )
        return naming
