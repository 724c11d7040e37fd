import logging
import sys
import timeit
from pathlib import Path
from typing import Optional, Union

import polars as pl
import yaml

# local imports
from wordcount.config import OUTPUT_FORMATS, get_config
from wordcount.counting.count_units import (
    CountMode,
    FrequencyTable,
    count,
    total_units,
)

logger = logging.getLogger(__name__)

STDIN_NAME = "-"


def make_count_df(table: FrequencyTable, top: Optional[int] = None) -> pl.DataFrame:
    """
    Convert a frequency table into a two column DataFrame.

    Rows are ordered by descending count, ties broken by unit text, so output
    files are stable between runs.

    Parameters
    ----------
    table : collections.Counter
        Result of :func:`count`.
    top : int, optional
        Keep only the first ``top`` rows.

    Returns
    -------
    polars.DataFrame
        Columns ``unit`` (Utf8) and ``count`` (UInt64).
    """
    df = pl.DataFrame(
        {"unit": list(table.keys()), "count": list(table.values())},
        schema={"unit": pl.Utf8, "count": pl.UInt64},
    )
    df = df.sort(["count", "unit"], descending=[True, False])

    if top is not None:
        df = df.head(top)

    return df


def write_counts(
    df: pl.DataFrame,
    out_file: Optional[Union[str, Path]] = None,
    output_format: str = "tsv",
) -> Optional[str]:
    """
    Write a count DataFrame as TSV, JSON or YAML.

    Parameters
    ----------
    df : polars.DataFrame
        Output of :func:`make_count_df`.
    out_file : str or Path, optional
        Destination file. If None the rendered text is returned instead.
    output_format : str
        One of ``tsv``, ``json`` or ``yaml``.

    Returns
    -------
    str or None
        Rendered text when ``out_file`` is None, otherwise None.
    """
    output_format = output_format.lower()

    if output_format == "tsv":
        return df.write_csv(out_file, include_header=True, separator="\t")
    elif output_format == "json":
        return df.write_json(out_file)
    elif output_format == "yaml":
        # Mapping keeps the DataFrame row order
        text = yaml.safe_dump(
            dict(df.iter_rows()),
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
        if out_file is None:
            return text
        Path(out_file).write_text(text, encoding="utf-8")
        return None

    raise ValueError(
        f"Unknown output format {output_format!r}, expected one of: {', '.join(OUTPUT_FORMATS)}"
    )


def run_count_units(
    in_file: Optional[str] = None,
    mode: Optional[Union[CountMode, str]] = None,
    out_file: Optional[str] = None,
    output_format: Optional[str] = None,
    top: Optional[int] = None,
) -> FrequencyTable:
    """
    Count units in one input file and write the resulting table.

    Options left as None are filled in from the user configuration.

    Parameters
    ----------
    in_file : str, optional
        Input text file. None or ``"-"`` reads standard input.
    mode : CountMode or str, optional
        Unit to count.
    out_file : str, optional
        Output file for counts. Defaults to writing to standard output.
    output_format : str, optional
        ``tsv``, ``json`` or ``yaml``.
    top : int, optional
        Only write the ``top`` most frequent units.

    Returns
    -------
    collections.Counter
        The full frequency table (not truncated by ``top``).
    """
    config = get_config()
    mode = CountMode.parse(mode if mode is not None else config.mode)
    output_format = (output_format or config.output_format).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format {output_format!r}, expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
    if top is None:
        top = config.top

    start = timeit.default_timer()

    if in_file is None or in_file == STDIN_NAME:
        logger.info(f"Counting {mode.value} units from standard input")
        freqs = count(sys.stdin.buffer, mode)
    else:
        logger.info(f"Counting {mode.value} units in {in_file}")
        with open(in_file, "rb") as stream:
            freqs = count(stream, mode)

    logger.info(
        f"Counted {total_units(freqs)} {mode.value} units ({len(freqs)} distinct) "
        f"in {timeit.default_timer() - start:.2f} seconds!"
    )

    count_df = make_count_df(freqs, top=top)

    # Write counts
    text = write_counts(count_df, out_file=out_file, output_format=output_format)
    if text is not None:
        sys.stdout.write(text)
    else:
        logger.debug(f"Wrote {count_df.height} rows to {out_file}")

    return freqs
