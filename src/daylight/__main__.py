from daylight.cli import main

raise SystemExit(main())
