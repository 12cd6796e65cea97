from docbundle.main import main

raise SystemExit(main())
