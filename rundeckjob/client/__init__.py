#!/usr/bin/env python

# This is the rundeck job client, to check and render flat job configs

import argparse
import sys

import rundeckjob
from rundeckjob.logger import setup_logger


def get_parser():
    parser = argparse.ArgumentParser(
        description="Rundeck Job Python",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--version",
        dest="version",
        help="show software version.",
        default=False,
        action="store_true",
    )
    parser.add_argument(
        "--debug",
        dest="debug",
        help="show debug logging.",
        default=False,
        action="store_true",
    )

    description = "actions for Rundeck Job Python"
    subparsers = parser.add_subparsers(
        help="actions",
        title="actions",
        description=description,
        dest="command",
    )

    # print version and exit
    subparsers.add_parser("version", description="show software version")

    validate = subparsers.add_parser(
        "validate",
        description="check that every job in a config translates",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    show = subparsers.add_parser(
        "show",
        description="show the canonical flat record for jobs in a config",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    show.add_argument(
        "--job",
        help="Only show jobs with this name",
    )

    for command in [validate, show]:
        command.add_argument(
            "config",
            help="Job configuration file (required)",
        )

    return parser


def run_rundeck_job():
    parser = get_parser()

    def help(return_code=0):
        version = rundeckjob.__version__

        print("\nRundeck Job Python v%s" % version)
        parser.print_help()
        sys.exit(return_code)

    # If the user didn't provide any arguments, show the full help
    if len(sys.argv) == 1:
        help()

    # If an error occurs while parsing the arguments, the interpreter will exit with value 2
    args, extra = parser.parse_known_args()

    # Show the version and exit
    if args.command == "version" or args.version:
        print(rundeckjob.__version__)
        sys.exit(0)

    setup_logger(args.debug)

    if args.command == "validate":
        from .validate import main
    elif args.command == "show":
        from .show import main
    else:
        help(1)

    sys.exit(main(args=args, parser=parser, extra=extra))


if __name__ == "__main__":
    run_rundeck_job()
