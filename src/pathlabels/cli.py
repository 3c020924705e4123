from __future__ import annotations

from .config import LabelConfig, PathStyle, Platform
from .table import label_table, read_paths

import argparse
import logging
import polars as pl



def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='pathlabels', description='Shortens a list of paths so that each one stays distinguishable.')
    parser.add_argument('paths', nargs='*', help='paths to label')
    parser.add_argument('--from-file', metavar='FILE', help='read paths from a file (one per line, or a CSV column with --column)')
    parser.add_argument('--column', help='CSV column holding the paths')
    parser.add_argument('--base', help='base path for relative labels')
    parser.add_argument('--platform', choices=[p.value for p in Platform], help='path conventions to use')
    parser.add_argument('--config', metavar='JSON', help='load settings from this file')
    parser.add_argument('--save-config', metavar='JSON', help='save the effective settings to this file')
    parser.add_argument('--csv', metavar='FILE', help='write the table as CSV instead of printing it')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def load_config(args: argparse.Namespace) -> LabelConfig:
    config = LabelConfig()
    if args.config:
        try:
            config = LabelConfig.load(args.config)
        except (OSError, ValueError) as ex:
            logging.error(f'Unable to load <{args.config}> ({ex})')
    if args.platform:
        config.style = PathStyle.for_platform(args.platform)
    if args.base:
        config.base_path = args.base
    return config


def run(args: argparse.Namespace) -> pl.DataFrame:
    config = load_config(args)

    paths = list(args.paths)
    if args.from_file:
        logging.info(f'Reading paths from <{args.from_file}>')
        paths.extend(read_paths(args.from_file, args.column, config.csv_separator))
    if len(paths) < 1:
        raise ValueError('No paths given')

    df = label_table(paths, config)

    if args.save_config:
        config.save(args.save_config)
        logging.info(f'Saved settings to <{args.save_config}>')

    if args.csv:
        df.write_csv(args.csv, separator=config.csv_separator)
        logging.info(f'Wrote <{args.csv}>')
    else:
        with pl.Config(tbl_rows=-1, fmt_str_lengths=200, tbl_hide_dataframe_shape=True):
            print(df)

    return df


def main(argv: list[str]|None = None) -> int:
    args = make_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        run(args)
        return 0
    except (OSError, ValueError) as ex:
        logging.error(str(ex))
        return 1
    except Exception as ex:
        logging.exception(f'Unhandled error: {ex}')
        return 1
