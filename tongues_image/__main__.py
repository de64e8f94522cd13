from tongues_image.cli import main

raise SystemExit(main())
