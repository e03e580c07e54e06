from echelon.demo import main

raise SystemExit(main())
