"""``python -m convention_checker`` のエントリポイント。"""

import sys

from convention_checker.cli import main

if __name__ == "__main__":
    sys.exit(main())
