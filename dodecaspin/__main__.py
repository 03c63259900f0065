import sys

from dodecaspin.main import cli

sys.exit(cli())
