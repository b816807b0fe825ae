import sys

from env_cmd.cli import main

sys.exit(main())
