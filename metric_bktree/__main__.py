import sys

from metric_bktree.cli.cli import main

sys.exit(main())
