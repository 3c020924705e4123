from __future__ import annotations

from .config import LabelConfig
from .labels import get_path_label
from .shorten import shorten

import logging
import polars as pl
from typing import Sequence



COLUMNS = ['path', 'short', 'label']


def label_table(paths: Sequence[str|None], config: LabelConfig|None = None) -> pl.DataFrame:
    """ One row per path, with its shortened form and its label relative to the configured base path """
    config = config or LabelConfig()
    paths = list(paths)

    shortened = shorten(paths, config.style)
    labels = [get_path_label(path, config.base_path, config.style) for path in paths]

    df = pl.DataFrame(
        {'path': paths, 'short': shortened, 'label': labels},
        schema={col: pl.Utf8 for col in COLUMNS},
    )
    logging.info(f'Labelled {df.height} paths')
    return df


def read_paths(path: str, column: str|None = None, separator: str = ',') -> list[str|None]:
    """
    Reads paths from a file: one per line for plain text, or a single column of a CSV file.
    """
    if column is None:
        with open(path, 'r', encoding='utf-8') as fp:
            return [line.rstrip('\r\n') for line in fp if line.strip() != '']

    df = pl.read_csv(path, separator=separator, comment_prefix='#', infer_schema=False)
    if column not in df.columns:
        raise ValueError(f'Column "{column}" not found in <{path}>; available: {df.columns}')
    return df.get_column(column).to_list()
