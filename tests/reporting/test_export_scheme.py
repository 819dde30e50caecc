"""Tests for the scheme TSV export."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from constants import ContingencyState  # noqa: E402
from reporting.export_scheme import (  # noqa: E402
    format_cell,
    scheme_to_dataframe,
    write_scheme_tsv,
)


class TestFormatCell:
    def test_sorted_names(self):
        states = frozenset({ContingencyState.TP, ContingencyState.FP, ContingencyState.FN})
        assert format_cell(states) == "FN,FP,TP"

    def test_empty(self):
        assert format_cell(frozenset()) == ""


class TestSchemeToDataframe:
    def test_shape(self, scheme):
        df = scheme_to_dataframe(scheme)
        assert len(df) == 15
        assert list(df.columns) == [
            "call_state",
            "HOM_REF",
            "HET_REF_VAR1",
            "HET_VAR1_VAR2",
            "HOM_VAR1",
            "NO_CALL",
            "LOW_GQ",
            "LOW_DP",
            "FILTERED",
            "IS_MIXED",
        ]

    def test_cells(self, scheme):
        df = scheme_to_dataframe(scheme).set_index("call_state")
        assert df.loc["HOM_REF", "HOM_REF"] == "TN"
        assert df.loc["HET_REF_VAR1", "HOM_REF"] == "FP,TN"
        assert df.loc["HET_VAR1_VAR3", "HET_VAR1_VAR2"] == "FN,FP,TP"
        assert df.loc["HET_REF_VAR2", "HOM_REF"] == "NA"
        assert df.loc["NO_CALL", "HOM_REF"] == ""

    def test_default_scheme(self):
        df = scheme_to_dataframe()
        assert df["call_state"].iloc[0] == "HOM_REF"
        assert df["call_state"].iloc[-1] == "IS_MIXED"


class TestWriteSchemeTsv:
    def test_round_trip(self, tmp_path, scheme):
        out = write_scheme_tsv(tmp_path / "scheme.tsv", scheme)
        assert out.exists()

        df = pd.read_csv(out, sep="\t", keep_default_na=False)
        assert len(df) == 15
        row = df[df["call_state"] == "HET_VAR1_VAR2"].iloc[0]
        assert row["HOM_VAR1"] == "FN,FP,TP"
        assert row["NO_CALL"] == ""
