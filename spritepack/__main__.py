import sys

from spritepack.cli import main

sys.exit(main())
