from calibration.main import main

raise SystemExit(main())
