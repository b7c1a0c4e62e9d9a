import sys

from todoscan.cli import main

sys.exit(main())
