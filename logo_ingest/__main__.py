from logo_ingest.main import main

raise SystemExit(main())
