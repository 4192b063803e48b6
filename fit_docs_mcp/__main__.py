import sys

from fit_docs_mcp.main import main

sys.exit(main())
