import sys

from shadcn_ui.cli import main

sys.exit(main())
