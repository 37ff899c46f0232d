import sys

from scm.repl import main

sys.exit(main())
