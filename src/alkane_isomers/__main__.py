from alkane_isomers.cli import main

raise SystemExit(main())
