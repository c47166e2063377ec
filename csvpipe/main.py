import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .adapters import do_count, do_print, read_from_file, write_to_file
from .config import load_config
from .exceptions import BaseError, WriteError
from .logger import get_logger
from .pipeline import Pipeline, StageFactory, combine_stages
from .settings import GlobalSettings


def gen_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="csvpipe", description="Run a lazy record pipeline over a CSV file.")
    parser.add_argument("input_file")
    parser.add_argument("--config", help="YAML or JSON pipeline definition")
    parser.add_argument("--output", help="CSV file to write the resulting records to")
    parser.add_argument("--count", action="store_true", help="print the number of resulting records")
    parser.add_argument("--overwrite", action="store_true", default=None, help="replace an existing output file")
    parser.add_argument("--delimiter")
    parser.add_argument("--enclosure")
    return parser


def gen_pipeline(config_path: Optional[str]) -> Pipeline:
    if config_path is None:
        return combine_stages(name="identity")
    return StageFactory().create_pipeline(load_config(config_path))


def run(args: Namespace, settings: GlobalSettings) -> int:
    delimiter = args.delimiter or settings.csv_settings.delimiter
    enclosure = args.enclosure or settings.csv_settings.enclosure
    overwrite = settings.writer_settings.overwrite if args.overwrite is None else args.overwrite

    if args.output and Path(args.output).resolve() == Path(args.input_file).resolve():
        raise WriteError(f"output file {args.output} is the input file")

    pipeline = gen_pipeline(args.config)
    records = pipeline(read_from_file(args.input_file, delimiter, enclosure))

    if args.output:
        write_to_file(records, args.output, delimiter, enclosure, overwrite=overwrite)
    elif args.count:
        print(do_count(records))
    else:
        do_print(records)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = gen_parser().parse_args(argv)
    settings = GlobalSettings()
    logger = get_logger(level=settings.logger_settings.level)
    try:
        return run(args, settings)
    except BaseError as e:
        logger.error(f"csvpipe failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
