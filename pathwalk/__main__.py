import sys

from pathwalk.cli import main

sys.exit(main())
