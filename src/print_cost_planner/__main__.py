from print_cost_planner.cli import main

raise SystemExit(main())
