import sys

from credential_sdk.cli import main

sys.exit(main())
