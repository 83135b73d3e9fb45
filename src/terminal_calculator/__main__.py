from terminal_calculator.main import main

raise SystemExit(main())
