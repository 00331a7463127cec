from photodoc.cli import main

raise SystemExit(main())
