"""
Structural views of a joined program: dense coefficient matrix and the
row/variable incidence graph.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from mps2lp.lp.equations import LinearProgram


def _variable_order(program: LinearProgram) -> list[str]:
    seen: dict[str, None] = {}
    for terms in program.equations.values():
        for var, _ in terms:
            seen.setdefault(var, None)
    return list(seen)


def coefficient_matrix(program: LinearProgram) -> tuple[list[str], list[str], np.ndarray, np.ndarray]:
    """
    Dense matrix A (rows x variables) and RHS vector b.

    Rows follow equation order, variables first-appearance order. Duplicate
    (variable, row) terms are summed here.
    """
    row_names = list(program.equations)
    var_names = _variable_order(program)
    col_index = {v: j for j, v in enumerate(var_names)}

    A = np.zeros((len(row_names), len(var_names)), dtype=float)
    for i, row in enumerate(row_names):
        for var, coef in program.equations[row]:
            A[i, col_index[var]] += coef
    b = np.array([program.rhs.get(row, 0.0) for row in row_names], dtype=float)
    return row_names, var_names, A, b


def incidence_graph(program: LinearProgram) -> Any:
    """Bipartite networkx graph: row:<name> and var:<name> nodes, one edge per (row, variable)."""
    import networkx as nx

    G = nx.Graph()
    for row, terms in program.equations.items():
        kind = "objective" if program.row_types.get(row) == "N" else "constraint"
        row_nid = f"row:{row}"
        G.add_node(row_nid, kind=kind, operator=program.row_types.get(row))
        for var, _ in terms:
            var_nid = f"var:{var}"
            if not G.has_node(var_nid):
                G.add_node(var_nid, kind="variable")
            G.add_edge(row_nid, var_nid)
    return G


def summarize(program: LinearProgram) -> dict[str, Any]:
    import networkx as nx

    G = incidence_graph(program)
    return {
        "name": program.name,
        "rows": len(program.equations),
        "objectives": len(program.objectives()),
        "constraints": len(program.constraints()),
        "variables": len(_variable_order(program)),
        "nonzeros": sum(len(terms) for terms in program.equations.values()),
        "components": nx.number_connected_components(G) if G.number_of_nodes() else 0,
    }
