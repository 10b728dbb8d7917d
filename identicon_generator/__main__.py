import sys

from identicon_generator.cli import main

sys.exit(main())
