import sys

from manor_mystery.main import main

sys.exit(main())
