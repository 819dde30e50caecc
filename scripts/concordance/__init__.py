"""Genotype concordance scheme: truth/call states to contingency cells.

Modules:
    scheme: GenotypeConcordanceScheme table, lookup and validation

Example:
    >>> from concordance import DEFAULT_SCHEME
    >>> from constants import CallState, TruthState
    >>> DEFAULT_SCHEME.get_contingency_state_set(TruthState.HOM_REF, CallState.HOM_REF)
    frozenset({<ContingencyState.TN: 'TN'>})
"""

from constants import TruthAndCallStates

from .scheme import (
    DEFAULT_SCHEME,
    GenotypeConcordanceScheme,
)

__all__ = [
    "TruthAndCallStates",
    "GenotypeConcordanceScheme",
    "DEFAULT_SCHEME",
]
