# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2025 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import argparse
import logging
import sys

import argcomplete

from dsfilters._constants import DEFAULT_LOG_LEVEL, LOG_LEVELS, filterAnalyzerVersion
from dsfilters.analyser import FilterAnalyser
from dsfilters.cli_base import setup_script_logger
from dsfilters.exceptions import FileAccessError, InvalidArgumentError, PatternError


def _build_parser():
    parser = argparse.ArgumentParser(
        description="Display the number of occurrences of each search filter shape, and of each "
                    "filter component, found in directory server access logs.\n"
                    "Mainly used for index tuning.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
    Examples:

    Analyze every access log of an instance:
        analyze-filters /var/log/dirsrv/slapd-host/access*

    Analyze an OpenLDAP log (loglevel 256 or more):
        analyze-filters /var/log/slapd.log

    Only show the 10 most frequent filters and components:
        analyze-filters --sizeLimit 10 /var/log/dirsrv/slapd-host/access
    """
    )

    parser.add_argument(
        'logs',
        type=str,
        nargs='*',
        help='Single or multiple (*) access logs, plain or gzip compressed'
    )
    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Display filter analyzer version'
    )
    parser.add_argument(
        '-s', '--sizeLimit',
        type=int,
        metavar="SIZE_LIMIT",
        default=None,
        help="Number of rows to display per table (default: all)"
    )
    parser.add_argument(
        '-l', '--loglevel',
        type=str,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help=f'Set logging level (default: {DEFAULT_LOG_LEVEL})'
    )
    return parser


def main(args=None):
    """
    Entry point for the filter analyzer.

    Args:
        args (list | None): Command line arguments, sys.argv[1:] when None.

    Raises:
        SystemExit: 1 on a missing or unreadable log file, 2 on an internal
            pattern error. Nothing is reported in both cases.
    """
    parser = _build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(args)

    if args.version:
        print(f"Filter Analyzer {filterAnalyzerVersion}")
        sys.exit(0)

    log_level = getattr(logging, args.loglevel.upper(), logging.INFO)
    log = setup_script_logger('analyze-filters', log_level)
    log.debug(f"Called with: {args}")

    try:
        if not args.logs:
            raise InvalidArgumentError("Missing file name")
        if args.sizeLimit is not None and args.sizeLimit < 0:
            raise InvalidArgumentError(f"Invalid size limit: {args.sizeLimit}")

        db = FilterAnalyser(logger=log)
        db.process_files(args.logs)
    except (InvalidArgumentError, FileAccessError) as e:
        log.error(str(e))
        sys.exit(1)
    except PatternError as e:
        log.error(f"Internal error: {e}")
        sys.exit(2)

    print(db.report(size_limit=args.sizeLimit))


if __name__ == "__main__":
    main()
