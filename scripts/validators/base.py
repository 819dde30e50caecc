"""Base validation utilities for the concordance scheme.

This module provides the checks that a scheme table must pass before it
is used for lookups, so that a defect in the table definition fails at
construction time with a message naming the offending row or cell.
"""

from collections.abc import Mapping, Sequence

from constants import (
    CALL_STATES,
    TRUTH_STATES,
    CallState,
    ContingencyState,
    TruthAndCallStates,
    TruthState,
)


class ValidationError(Exception):
    """Custom exception for scheme validation failures."""

    pass


def validate_row_length(call_state: CallState, contingency_sets: Sequence) -> None:
    """Validate that a scheme row supplies one set per truth state.

    Args:
        call_state: Call state the row is defined for
        contingency_sets: Contingency sets in truth-state order

    Raises:
        ValidationError: If the number of sets differs from the number of
            truth states
    """
    if len(contingency_sets) != len(TRUTH_STATES):
        raise ValidationError(
            f"Length mismatch for row {call_state.name}: got "
            f"{len(contingency_sets)} contingency sets, expected "
            f"{len(TRUTH_STATES)} (one per truth state)"
        )


def validate_complete(scheme: Mapping) -> None:
    """Validate that every truth/call pair has an entry.

    Pairs are checked truth state first, then call state, and the first
    missing pair is reported.

    Args:
        scheme: Mapping keyed by TruthAndCallStates

    Raises:
        ValidationError: If any pair is missing

    Example:
        >>> validate_complete({})
        ValidationError: Missing scheme tuple: [HOM_REF, HOM_REF]
    """
    for truth_state in TRUTH_STATES:
        for call_state in CALL_STATES:
            if TruthAndCallStates(truth_state, call_state) not in scheme:
                raise ValidationError(
                    f"Missing scheme tuple: [{truth_state.name}, {call_state.name}]"
                )


def validate_no_extra_keys(scheme: Mapping) -> None:
    """Validate that the scheme has no keys outside the state domain.

    Args:
        scheme: Mapping keyed by TruthAndCallStates

    Raises:
        ValidationError: If a key holds a value that is not a known state
    """
    for key in scheme:
        if not isinstance(key.truth_state, TruthState) or not isinstance(
            key.call_state, CallState
        ):
            raise ValidationError(f"Unexpected scheme tuple: {key}")


def validate_na_exclusive(scheme: Mapping) -> None:
    """Validate that NA never shares a cell with another contingency state.

    Args:
        scheme: Mapping of TruthAndCallStates to contingency sets

    Raises:
        ValidationError: If a cell mixes NA with TP, FP, TN or FN
    """
    for key, states in scheme.items():
        if ContingencyState.NA in states and len(states) > 1:
            others = sorted(s.name for s in states if s is not ContingencyState.NA)
            raise ValidationError(
                f"Scheme tuple {key} mixes NA with {others}"
            )
