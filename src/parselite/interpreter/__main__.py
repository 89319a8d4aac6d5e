"""Entry point for ``python -m parselite.interpreter``."""

import sys

from parselite.interpreter.repl import main

sys.exit(main())
