from bankomat.cli import main

raise SystemExit(main())
