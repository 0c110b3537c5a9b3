from kbdwrap.main import main

raise SystemExit(main())
