import sys

from weathersms.cli import main

sys.exit(main())
