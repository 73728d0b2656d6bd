"""Module entrypoint for `python -m yaml_lint.linter`.

Delegates to the linter CLI implementation.
"""

import sys

from .run_lint import main


if __name__ == "__main__":
    sys.exit(main())
