import sys

from pfh.nacamesh.cli import main


sys.exit(main())
