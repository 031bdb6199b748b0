from bpedit.main import main

raise SystemExit(main())
