"""Export the genotype concordance scheme as a TSV table.

Called via Snakemake `script:` directive. Writes one row per call state
and one column per truth state; each cell lists the contingency states the
pair contributes to, comma-separated, or is empty when it contributes to
none.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pandas as pd

# Add scripts directory to path for imports
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent)
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from concordance import DEFAULT_SCHEME, GenotypeConcordanceScheme  # noqa: E402
from constants import CALL_STATES, TRUTH_STATES  # noqa: E402

log = logging.getLogger(__name__)


def format_cell(states) -> str:
    """Render a contingency set as sorted, comma-joined state names."""
    return ",".join(sorted(s.name for s in states))


def scheme_to_dataframe(scheme: GenotypeConcordanceScheme = DEFAULT_SCHEME) -> pd.DataFrame:
    """Lay the scheme out as a call-state by truth-state DataFrame.

    Args:
        scheme: Validated scheme to export

    Returns:
        DataFrame with a ``call_state`` column followed by one column per
        truth state, rows and columns in enumeration order
    """
    records = []
    for call_state in CALL_STATES:
        row = {"call_state": call_state.name}
        for truth_state in TRUTH_STATES:
            states = scheme.get_contingency_state_set(truth_state, call_state)
            row[truth_state.name] = format_cell(states)
        records.append(row)

    return pd.DataFrame(records, columns=["call_state"] + [t.name for t in TRUTH_STATES])


def write_scheme_tsv(
    output_path: str | Path, scheme: GenotypeConcordanceScheme = DEFAULT_SCHEME
) -> Path:
    """Write the scheme table to a tab-separated file.

    Args:
        output_path: Destination TSV path
        scheme: Validated scheme to export

    Returns:
        Path of the written file
    """
    path = Path(output_path)
    df = scheme_to_dataframe(scheme)
    df.to_csv(path, sep="\t", index=False)
    log.info("Wrote %d scheme rows to %s", len(df), path)
    return path


try:
    from typing import TYPE_CHECKING

    if TYPE_CHECKING:
        from snakemake.script import Snakemake

        snakemake: Snakemake
    else:
        snakemake = snakemake  # type: ignore  # noqa: F821

    logging.basicConfig(
        filename=snakemake.log[0],
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    write_scheme_tsv(snakemake.output.tsv)

except NameError:
    pass  # Not running via Snakemake
