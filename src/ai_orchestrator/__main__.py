import sys

from ai_orchestrator.cli import main

sys.exit(main())
