import sys

from club_analytics.cli import main

sys.exit(main())
