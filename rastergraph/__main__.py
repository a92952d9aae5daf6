from rastergraph.cli import main

raise SystemExit(main())
