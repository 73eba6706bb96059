import sys

from projects_app.main import main

sys.exit(main())
