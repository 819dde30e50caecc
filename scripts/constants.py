"""Genotype state enumerations and the scheme key for concordance scoring.

Centralizes the truth-side, call-side and contingency categories so that
the scheme table and its collaborators address cells by name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TruthState(Enum):
    """Genotype categories on the truth side of a comparison.

    Member order is the column order of the concordance scheme table.
    """

    HOM_REF = "HOM_REF"
    HET_REF_VAR1 = "HET_REF_VAR1"
    HET_VAR1_VAR2 = "HET_VAR1_VAR2"
    HOM_VAR1 = "HOM_VAR1"
    NO_CALL = "NO_CALL"
    LOW_GQ = "LOW_GQ"
    LOW_DP = "LOW_DP"
    FILTERED = "FILTERED"
    IS_MIXED = "IS_MIXED"


class CallState(Enum):
    """Genotype categories on the call side of a comparison.

    VAR1 is the first non-reference allele seen in the truth genotype; VAR2,
    VAR3 and VAR4 are alleles the call introduces. There is no HET_VAR2_VAR3
    because the slots are symbolic and that case is HET_VAR3_VAR4.
    """

    HOM_REF = "HOM_REF"
    HET_REF_VAR1 = "HET_REF_VAR1"
    HET_REF_VAR2 = "HET_REF_VAR2"
    HET_REF_VAR3 = "HET_REF_VAR3"
    HET_VAR1_VAR2 = "HET_VAR1_VAR2"
    HET_VAR1_VAR3 = "HET_VAR1_VAR3"
    HET_VAR3_VAR4 = "HET_VAR3_VAR4"
    HOM_VAR1 = "HOM_VAR1"
    HOM_VAR2 = "HOM_VAR2"
    HOM_VAR3 = "HOM_VAR3"
    NO_CALL = "NO_CALL"
    LOW_GQ = "LOW_GQ"
    LOW_DP = "LOW_DP"
    FILTERED = "FILTERED"
    IS_MIXED = "IS_MIXED"


class ContingencyState(Enum):
    """Contingency table cells a comparison can contribute to.

    NA marks a truth/call combination that upstream comparison logic never
    produces.
    """

    TP = "TP"
    FP = "FP"
    TN = "TN"
    FN = "FN"
    NA = "NA"


TRUTH_STATES = tuple(TruthState)
CALL_STATES = tuple(CallState)


@dataclass(frozen=True)
class TruthAndCallStates:
    """A (truth, call) pair with structural equality and hashing.

    Members of different enumerations never compare equal, so a key built
    with the states swapped matches no cell. Keys sort by the truth state's
    position, then the call state's.
    """

    truth_state: TruthState
    call_state: CallState

    def _ordinals(self) -> tuple[int, int]:
        return (
            TRUTH_STATES.index(self.truth_state),
            CALL_STATES.index(self.call_state),
        )

    def __lt__(self, other: TruthAndCallStates) -> bool:
        if not isinstance(other, TruthAndCallStates):
            return NotImplemented
        return self._ordinals() < other._ordinals()

    def __str__(self) -> str:
        truth = getattr(self.truth_state, "name", self.truth_state)
        call = getattr(self.call_state, "name", self.call_state)
        return f"[{truth}, {call}]"
