from duoqian.cli import main

raise SystemExit(main())
