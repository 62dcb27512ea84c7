import sys

from localekeys.cli import main

sys.exit(main())
