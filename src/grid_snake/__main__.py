import sys

from grid_snake.cli import main

sys.exit(main())
