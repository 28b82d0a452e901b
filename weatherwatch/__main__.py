# ABOUTME: Allows running the menu with `python -m weatherwatch`
# ABOUTME: Delegates to weatherwatch.main.main

from weatherwatch.main import main

raise SystemExit(main())
