from dalton.cli import main

raise SystemExit(main())
