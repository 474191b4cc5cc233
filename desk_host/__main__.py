import sys

from desk_host.main import main

sys.exit(main())
