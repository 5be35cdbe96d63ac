from __future__ import annotations

import sys

from api import main

if __name__ == "__main__":
    # 例: python main.py --seed 42 --log-level DEBUG
    sys.exit(main(sys.argv[1:]))
