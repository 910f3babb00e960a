import sys

from streamhash.app import main

sys.exit(main())
