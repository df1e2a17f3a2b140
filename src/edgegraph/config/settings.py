from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------
# Graph container behaviour
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls debug behaviour of an EdgeListGraph.

    Neither option changes what the graph stores or returns from
    its mutation and query operations.
    """

    # Re-validate the whole structure after every mutation.
    check_invariants: bool = False

    # Sort vertices and edges in the display dump instead of
    # following the underlying collection order.
    display_sorted: bool = False
