"""Genotype concordance scheme.

Defines, for every truth state and call state pair, the set of contingency
table cells the comparison contributes to. The default table follows the
GA4GH Benchmarking Work Group's proposed evaluation scheme.

A comparison of two allele sets can contribute to several cells at once.
For example, a HET_VAR1_VAR2 truth genotype called as HET_VAR1_VAR3 gives a
true positive for the shared VAR1, a false positive for the called VAR3 and
a false negative for the missed VAR2. A true negative is added whenever both
truth and call carry the reference allele. NA marks pairs that upstream
comparison logic never produces.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from constants import (
    CALL_STATES,
    TRUTH_STATES,
    CallState,
    ContingencyState,
    TruthAndCallStates,
    TruthState,
)
from validators import (
    ValidationError,
    validate_complete,
    validate_na_exclusive,
    validate_no_extra_keys,
    validate_row_length,
)

log = logging.getLogger(__name__)

TP = ContingencyState.TP
FP = ContingencyState.FP
TN = ContingencyState.TN
FN = ContingencyState.FN

NA = frozenset({ContingencyState.NA})
EMPTY: frozenset[ContingencyState] = frozenset()
TP_ONLY = frozenset({TP})
FP_ONLY = frozenset({FP})
TN_ONLY = frozenset({TN})
FN_ONLY = frozenset({FN})
TP_FN = frozenset({TP, FN})
TP_FP = frozenset({TP, FP})
TP_TN = frozenset({TP, TN})
FP_FN = frozenset({FP, FN})
FP_TN = frozenset({FP, TN})
FP_TN_FN = frozenset({FP, TN, FN})
TP_FP_FN = frozenset({TP, FP, FN})
TN_FN = frozenset({TN, FN})


class GenotypeConcordanceScheme:
    """Lookup table from (truth, call) states to contingency state sets.

    The table is defined in ``define_rows`` and validated when the scheme
    is constructed. Once validated the scheme is sealed: no more rows can be
    added and lookups are served from a read-only view.
    """

    def __init__(self) -> None:
        self._scheme: dict[TruthAndCallStates, frozenset[ContingencyState]] = {}
        self._validated = False
        self.define_rows()
        self.validate_scheme()

    def define_rows(self) -> None:
        """Populate the table, one row per call state in truth-state column order."""
        # fmt: off
        #                                HOM_REF  HET_REF_VAR1  HET_VAR1_VAR2  HOM_VAR1  NO_CALL  LOW_GQ  LOW_DP  FILTERED  IS_MIXED
        self.add_row(CallState.HOM_REF,       TN_ONLY, TN_FN,    FN_ONLY,  FN_ONLY,  EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        self.add_row(CallState.HET_REF_VAR1,  FP_TN,   TP_TN,    TP_FN,    TP_FN,    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        self.add_row(CallState.HET_REF_VAR2,  NA,      FP_TN_FN, NA,       FP_FN,    NA,    NA,    NA,    NA,    NA)
        self.add_row(CallState.HET_REF_VAR3,  NA,      NA,       FP_FN,    NA,       NA,    NA,    NA,    NA,    NA)
        self.add_row(CallState.HET_VAR1_VAR2, FP_ONLY, TP_FP,    TP_ONLY,  TP_FP_FN, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        self.add_row(CallState.HET_VAR1_VAR3, NA,      NA,       TP_FP_FN, NA,       NA,    NA,    NA,    NA,    NA)
        self.add_row(CallState.HET_VAR3_VAR4, FP_ONLY, FP_FN,    FP_FN,    FP_FN,    NA,    NA,    NA,    NA,    NA)
        self.add_row(CallState.HOM_VAR1,      FP_ONLY, TP_FP,    TP_FN,    TP_ONLY,  EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        self.add_row(CallState.HOM_VAR2,      NA,      FP_FN,    TP_FN,    FP_FN,    NA,    NA,    NA,    NA,    NA)
        self.add_row(CallState.HOM_VAR3,      NA,      NA,       FP_FN,    NA,       NA,    NA,    NA,    NA,    NA)
        self.add_row(CallState.NO_CALL,       EMPTY,   EMPTY,    EMPTY,    EMPTY,    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        self.add_row(CallState.FILTERED,      EMPTY,   EMPTY,    EMPTY,    EMPTY,    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        self.add_row(CallState.LOW_GQ,        EMPTY,   EMPTY,    EMPTY,    EMPTY,    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        self.add_row(CallState.LOW_DP,        EMPTY,   EMPTY,    EMPTY,    EMPTY,    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        self.add_row(CallState.IS_MIXED,      EMPTY,   EMPTY,    EMPTY,    EMPTY,    EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        # fmt: on

    def add_row(
        self, call_state: CallState, *contingency_sets: frozenset[ContingencyState]
    ) -> None:
        """Add a row to the scheme.

        Args:
            call_state: The call state (row)
            *contingency_sets: One contingency set per truth state, in
                TruthState order

        Raises:
            ValidationError: If the scheme is already validated or the row
                does not have one set per truth state
        """
        if self._validated:
            raise ValidationError(
                f"Cannot add row {call_state.name}: scheme is already validated"
            )
        validate_row_length(call_state, contingency_sets)
        for truth_state, states in zip(TRUTH_STATES, contingency_sets):
            self._scheme[TruthAndCallStates(truth_state, call_state)] = frozenset(states)

    def validate_scheme(self) -> None:
        """Check that every truth/call pair exists in the scheme.

        The full scan runs only once; later calls return immediately.

        Raises:
            ValidationError: If a pair is missing, a key falls outside the
                state domain, or a cell mixes NA with other states
        """
        if self._validated:
            return

        validate_complete(self._scheme)
        validate_no_extra_keys(self._scheme)
        validate_na_exclusive(self._scheme)

        self._scheme = MappingProxyType(self._scheme)
        self._validated = True
        log.debug(
            "Validated %s with %d cells (%d truth x %d call states)",
            type(self).__name__,
            len(self._scheme),
            len(TRUTH_STATES),
            len(CALL_STATES),
        )

    @property
    def is_validated(self) -> bool:
        return self._validated

    def get_contingency_state_set(
        self, truth_state: TruthState, call_state: CallState
    ) -> frozenset[ContingencyState] | None:
        """Get the contingency state set for a truth state and call state.

        Returns:
            The contingency states for the pair, or None if the pair was
            never registered. An empty set means the comparison contributes
            to no cell.

        Raises:
            ValidationError: If the scheme has not been validated yet
        """
        return self.get_contingency_state_set_for(
            TruthAndCallStates(truth_state, call_state)
        )

    def get_contingency_state_set_for(
        self, truth_and_call_states: TruthAndCallStates
    ) -> frozenset[ContingencyState] | None:
        """Get the contingency state set for a TruthAndCallStates key."""
        if not self._validated:
            raise ValidationError(
                f"Lookup of {truth_and_call_states} before the scheme was validated"
            )
        return self._scheme.get(truth_and_call_states)

    def keys(self) -> list[TruthAndCallStates]:
        """Registered keys in table order (truth state, then call state)."""
        return sorted(self._scheme)

    def __len__(self) -> int:
        return len(self._scheme)


DEFAULT_SCHEME = GenotypeConcordanceScheme()
