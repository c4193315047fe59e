from codekata.cli import main

raise SystemExit(main())
