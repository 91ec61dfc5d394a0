#!/usr/bin/env python3
"""Run checkherald from a source checkout.

    python hrun.py format --var NAGIOS_SERVICECHECKCOMMAND="check!'http://graphite/render?target=x'"
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from checkherald.cli import main

if __name__ == "__main__":
    main()
