from launchpad.cli import main

raise SystemExit(main())
