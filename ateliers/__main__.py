import sys

from ateliers.demo import main

sys.exit(main())
