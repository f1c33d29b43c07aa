"""Direct entry point for the fsmap command.

This file is used as the console script entry point. It imports and
executes the main function from __main__.py.
"""

import sys


def main() -> int:
    """Entry point for fsmap command.

    Returns:
        Exit code
    """
    from fsmap.__main__ import main as _main
    return _main()


if __name__ == "__main__":
    sys.exit(main())
