#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.resolve()

# Make the package importable when run from a checkout
sys.path.insert(0, str(PROJECT_ROOT))

from promptline.cli.cli_router import main

if __name__ == "__main__":
    sys.exit(main())
