import sys

from deckcounter.main import main

sys.exit(main())
