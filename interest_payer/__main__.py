import sys

from interest_payer.main import main

sys.exit(main())
