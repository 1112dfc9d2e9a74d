import sys

from pacman4k.app import main

sys.exit(main())
