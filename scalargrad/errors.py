# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Exception types raised by scalargrad."""
from __future__ import annotations


class ScalarGradError(Exception):
    """Base class for all scalargrad errors."""


class GraphCycleError(ScalarGradError, RuntimeError):
    """A node was reached again while still on the DFS path.

    ``node`` is the node that closes the cycle.
    """

    def __init__(self, node=None):
        self.node = node
        msg = "computation graph contains a cycle"
        if node is not None:
            msg += f" through {node!r}"
        super().__init__(msg)


class GradcheckError(ScalarGradError, AssertionError):
    """Analytic and numeric gradients disagree."""
