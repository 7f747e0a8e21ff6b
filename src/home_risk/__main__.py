import sys

from home_risk.cli import main

sys.exit(main())
