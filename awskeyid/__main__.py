import sys

from awskeyid.cli import main as cli_main


def main(args=None):
    """The main routine."""
    if args is None:
        args = sys.argv[1:]

    return cli_main(args)


if __name__ == "__main__":
    sys.exit(main())
