import sys

from gridsnake.cli.play import main

sys.exit(main())
