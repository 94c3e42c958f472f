from tinysdp.cli import main

raise SystemExit(main())
